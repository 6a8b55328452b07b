"""Pure transitions over RequestState and the ``request_state`` namespace."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from request_state._types import UNSET, D, M, _Unset
from request_state.state import RequestState, RequestStateConfig


def create_request_state(
    config: Mapping[str, Any] | None = None, /, **options: Any
) -> RequestState[Any, Any]:
    """Return a fresh, uninitialized record.

    ``config`` is an optional partial mapping; keyword ``options`` are
    merged on top of it. Raises InvalidConfig for unknown keys.
    """
    cfg: RequestStateConfig[Any] = RequestStateConfig.from_options(config, **options)
    return RequestState(config=cfg, data=cfg.initial_data)


def request(
    state: RequestState[D, M], meta: M | None | _Unset = UNSET
) -> RequestState[D, M]:
    """Mark the operation as in flight."""
    config = state.config
    return replace(
        state,
        initialized=True,
        pending=True,
        data=config.initial_data if config.clear_data else state.data,
        error=None if config.clear_error else state.error,
        meta=state.meta if meta is UNSET else meta,
    )


def succeeded(
    state: RequestState[D, M], data: D, meta: M | None | _Unset = UNSET
) -> RequestState[D, M]:
    """Store the payload and clear any error, regardless of config."""
    return replace(
        state,
        initialized=True,
        pending=False,
        data=data,
        error=None,
        meta=state.meta if meta is UNSET else meta,
    )


def failed(
    state: RequestState[D, M], error: Any, meta: M | None | _Unset = UNSET
) -> RequestState[D, M]:
    """Store the error; data is reset only when ``clear_data`` is set."""
    config = state.config
    return replace(
        state,
        initialized=True,
        pending=False,
        data=config.initial_data if config.clear_data else state.data,
        error=error,
        meta=state.meta if meta is UNSET else meta,
    )


class RequestStateNamespace:
    """Callable holder: call it to construct, use its attributes to transition."""

    request = staticmethod(request)
    succeeded = staticmethod(succeeded)
    failed = staticmethod(failed)

    def __call__(
        self, config: Mapping[str, Any] | None = None, /, **options: Any
    ) -> RequestState[Any, Any]:
        return create_request_state(config, **options)

    def __repr__(self) -> str:
        return "request_state"


request_state = RequestStateNamespace()
