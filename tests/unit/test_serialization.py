"""Tests for snapshot() and store_snapshot()."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date

from request_state.reducer import failed, request, request_state, succeeded
from request_state.serialization import snapshot, store_snapshot
from request_state.store import RequestStateStore


@dataclass
class _Item:
    id: int
    created: date


class TestSnapshot:
    def test_idle_state(self) -> None:
        assert snapshot(request_state()) == {
            "initialized": False,
            "pending": False,
            "data": None,
            "error": None,
            "meta": None,
            "phase": "idle",
        }

    def test_pending_with_meta(self) -> None:
        result = snapshot(request(request_state(), {"page": 2}))
        assert result["pending"] is True
        assert result["meta"] == {"page": 2}
        assert result["phase"] == "pending"

    def test_encodes_nested_data(self) -> None:
        state = succeeded(request_state(), [_Item(id=1, created=date(2024, 1, 2))])
        result = snapshot(state)
        assert result["data"] == [{"id": 1, "created": "2024-01-02"}]
        json.dumps(result)

    def test_exception_error_rendered(self) -> None:
        state = failed(request_state(), TimeoutError("upstream timed out"))
        assert snapshot(state)["error"] == {
            "type": "TimeoutError",
            "detail": "upstream timed out",
        }

    def test_plain_error_passed_through(self) -> None:
        state = failed(request_state(), {"code": 404})
        assert snapshot(state)["error"] == {"code": 404}

    def test_config_not_included(self) -> None:
        assert "config" not in snapshot(request_state(clear_data=True))


class TestStoreSnapshot:
    def test_every_slice_included(self, store: RequestStateStore) -> None:
        store.register("users", initial_data=[])
        store.request("items")
        result = store_snapshot(store)
        assert set(result) == {"items", "users"}
        assert result["items"]["phase"] == "pending"
        assert result["users"]["data"] == []

    def test_empty_store(self) -> None:
        assert store_snapshot(RequestStateStore()) == {}
