"""request-state - lifecycle records for asynchronous data fetches."""

from request_state._types import UNSET
from request_state.dependency import install_store, store_dependency
from request_state.exceptions import (
    InvalidConfig,
    RequestStateError,
    SliceAlreadyRegistered,
    StoreNotInstalled,
    UnknownSlice,
)
from request_state.hooks import OnTransition, TransitionHook
from request_state.reducer import (
    RequestStateNamespace,
    create_request_state,
    failed,
    request,
    request_state,
    succeeded,
)
from request_state.serialization import snapshot, store_snapshot
from request_state.state import RequestPhase, RequestState, RequestStateConfig
from request_state.store import RequestStateStore

__all__ = [
    "UNSET",
    "InvalidConfig",
    "OnTransition",
    "RequestPhase",
    "RequestState",
    "RequestStateConfig",
    "RequestStateError",
    "RequestStateNamespace",
    "RequestStateStore",
    "SliceAlreadyRegistered",
    "StoreNotInstalled",
    "TransitionHook",
    "UnknownSlice",
    "create_request_state",
    "failed",
    "install_store",
    "request",
    "request_state",
    "snapshot",
    "store_dependency",
    "store_snapshot",
    "succeeded",
]
