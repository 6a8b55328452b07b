"""
Basic usage example of request-state.

Demonstrates:
- Building a record and walking it through request / succeeded / failed
- Keeping named slices in a store attached to a FastAPI app
- Exposing JSON snapshots of the store to clients
"""

from typing import Any

from fastapi import Depends, FastAPI

from request_state import (
    RequestStateStore,
    install_store,
    request_state,
    store_dependency,
    store_snapshot,
)

# Pure transitions, no container involved
todos = request_state(initial_data=[], clear_error=True)
todos = request_state.request(todos, {"page": 1})
todos = request_state.succeeded(todos, ["write docs"])

app = FastAPI(title="Request State Example")
store = install_store(app)
store.register("weather", clear_data=True)


# Mock upstream call (replace with a real client)
async def fetch_weather(city: str) -> dict[str, Any]:
    if city == "atlantis":
        raise LookupError(f"Unknown city {city}")
    return {"city": city, "temperature": 21}


@app.post("/weather/{city}")
async def refresh_weather(
    city: str, states: RequestStateStore = Depends(store_dependency())
):
    """Fetch weather and record the outcome in the ``weather`` slice."""
    states.request("weather", {"city": city})
    try:
        states.succeeded("weather", await fetch_weather(city))
    except LookupError as exc:
        states.failed("weather", exc)
    return store_snapshot(states)["weather"]


@app.get("/states")
async def list_states(states: RequestStateStore = Depends(store_dependency())):
    """Current snapshot of every slice."""
    return store_snapshot(states)


# Test with:
# curl -X POST http://localhost:8000/weather/lisbon
# curl -X POST http://localhost:8000/weather/atlantis
# curl http://localhost:8000/states
