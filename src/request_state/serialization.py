"""JSON-ready snapshots of records and stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi.encoders import jsonable_encoder

from request_state.state import RequestState

if TYPE_CHECKING:
    from request_state.store import RequestStateStore


def _encode_error(error: Any) -> Any:
    if isinstance(error, BaseException):
        return {"type": type(error).__name__, "detail": str(error)}
    return error


def snapshot(state: RequestState[Any, Any]) -> dict[str, Any]:
    """Public view of a record. The config is not included."""
    result: dict[str, Any] = jsonable_encoder(
        {
            "initialized": state.initialized,
            "pending": state.pending,
            "data": state.data,
            "error": _encode_error(state.error),
            "meta": state.meta,
            "phase": state.phase.value,
        }
    )
    return result


def store_snapshot(store: RequestStateStore) -> dict[str, dict[str, Any]]:
    """Snapshot of every slice, keyed by slice name."""
    return {name: snapshot(store.get(name)) for name in store}
