"""TransitionHook base and the OnTransition convenience hook."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from request_state.state import RequestState

Transition = Literal["request", "succeeded", "failed"]


class TransitionHook:
    """Base abstraction for store observers. ``on_transition`` is a no-op."""

    def on_transition(
        self,
        name: str,
        transition: Transition,
        before: RequestState[Any, Any],
        after: RequestState[Any, Any],
    ) -> None:
        pass


class OnTransition(TransitionHook):
    """Convenience hook forwarding every transition to a callback."""

    def __init__(
        self,
        callback: Callable[
            [str, Transition, RequestState[Any, Any], RequestState[Any, Any]], None
        ],
    ) -> None:
        self._callback = callback

    def on_transition(
        self,
        name: str,
        transition: Transition,
        before: RequestState[Any, Any],
        after: RequestState[Any, Any],
    ) -> None:
        self._callback(name, transition, before, after)
