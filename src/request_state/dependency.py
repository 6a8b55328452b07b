"""install_store() and store_dependency() — FastAPI integration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from starlette.requests import Request

from request_state.exceptions import StoreNotInstalled
from request_state.store import RequestStateStore

logger = logging.getLogger(__name__)

DEFAULT_STATE_ATTR = "request_states"


def install_store(
    app: Any,
    store: RequestStateStore | None = None,
    *,
    attr: str = DEFAULT_STATE_ATTR,
) -> RequestStateStore:
    """Attach a store to ``app.state`` and return it."""
    if store is None:
        store = RequestStateStore()
    setattr(app.state, attr, store)
    logger.debug("Installed RequestStateStore on app.state.%s", attr)
    return store


def store_dependency(
    attr: str = DEFAULT_STATE_ATTR,
) -> Callable[[Request], RequestStateStore]:
    """Return a FastAPI-compatible dependency resolving the installed store."""

    def dependency(request: Request) -> RequestStateStore:
        store = getattr(request.app.state, attr, None)
        if not isinstance(store, RequestStateStore):
            raise StoreNotInstalled(attr)
        return store

    return dependency
