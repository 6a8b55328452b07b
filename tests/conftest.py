"""Shared pytest fixtures for request-state tests."""

from __future__ import annotations

from typing import Any

import pytest

from request_state.hooks import OnTransition
from request_state.store import RequestStateStore


@pytest.fixture
def store() -> RequestStateStore:
    """Store with an ``items`` slice using default config."""
    store = RequestStateStore()
    store.register("items")
    return store


@pytest.fixture
def recorded() -> list[tuple[Any, ...]]:
    """Sink for transitions captured by ``recording_hook``."""
    return []


@pytest.fixture
def recording_hook(recorded: list[tuple[Any, ...]]) -> OnTransition:
    """Hook appending (name, transition, before, after) to ``recorded``."""

    def _record(name: str, transition: str, before: Any, after: Any) -> None:
        recorded.append((name, transition, before, after))

    return OnTransition(_record)
