"""RequestStateError hierarchy for configuration and container errors."""

from __future__ import annotations


class RequestStateError(Exception):
    """Base for all request-state exceptions."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidConfig(RequestStateError):
    """Construction-time configuration was rejected."""

    def __init__(self, detail: str, *, key: str | None = None) -> None:
        super().__init__(detail)
        self.key = key


class UnknownSlice(RequestStateError, KeyError):
    """No slice is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown request state slice: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return self.detail


class SliceAlreadyRegistered(RequestStateError):
    """A slice with the same name already exists in the store."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Request state slice already registered: {name!r}")
        self.name = name


class StoreNotInstalled(RequestStateError):
    """The application has no RequestStateStore attached."""

    def __init__(self, attr: str) -> None:
        super().__init__(f"No RequestStateStore installed on app.state.{attr}")
        self.attr = attr
