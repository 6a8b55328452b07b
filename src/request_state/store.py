"""RequestStateStore — named RequestState slices inside an application state."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from request_state import reducer
from request_state._types import UNSET, _Unset
from request_state.exceptions import SliceAlreadyRegistered, UnknownSlice
from request_state.hooks import Transition, TransitionHook
from request_state.state import RequestState

logger = logging.getLogger(__name__)


class RequestStateStore:
    """Holds the current record per slice name and swaps in transition results.

    No locking is done; callers serialize access to a store.
    """

    def __init__(self) -> None:
        self._slices: dict[str, RequestState[Any, Any]] = {}
        self._hooks: list[TransitionHook] = []

    def register(
        self, name: str, config: Mapping[str, Any] | None = None, /, **options: Any
    ) -> RequestState[Any, Any]:
        if name in self._slices:
            raise SliceAlreadyRegistered(name)
        state = reducer.create_request_state(config, **options)
        self._slices[name] = state
        logger.debug("Registered request state slice %s", name)
        return state

    def add_hook(self, hook: TransitionHook) -> RequestStateStore:
        self._hooks.append(hook)
        return self

    def get(self, name: str) -> RequestState[Any, Any]:
        try:
            return self._slices[name]
        except KeyError:
            raise UnknownSlice(name) from None

    def __getitem__(self, name: str) -> RequestState[Any, Any]:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._slices

    def __len__(self) -> int:
        return len(self._slices)

    def __iter__(self) -> Iterator[str]:
        return iter(self._slices)

    def names(self) -> list[str]:
        return list(self._slices)

    def request(
        self, name: str, meta: Any | _Unset = UNSET
    ) -> RequestState[Any, Any]:
        before = self.get(name)
        return self._commit(name, "request", before, reducer.request(before, meta))

    def succeeded(
        self, name: str, data: Any, meta: Any | _Unset = UNSET
    ) -> RequestState[Any, Any]:
        before = self.get(name)
        return self._commit(
            name, "succeeded", before, reducer.succeeded(before, data, meta)
        )

    def failed(
        self, name: str, error: Any, meta: Any | _Unset = UNSET
    ) -> RequestState[Any, Any]:
        before = self.get(name)
        return self._commit(name, "failed", before, reducer.failed(before, error, meta))

    def _commit(
        self,
        name: str,
        transition: Transition,
        before: RequestState[Any, Any],
        after: RequestState[Any, Any],
    ) -> RequestState[Any, Any]:
        self._slices[name] = after
        logger.debug(
            "Slice %s: %s (%s -> %s)",
            name,
            transition,
            before.phase.value,
            after.phase.value,
        )
        for hook in self._hooks:
            hook.on_transition(name, transition, before, after)
        return after
