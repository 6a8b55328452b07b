"""RequestState — lifecycle record for a single asynchronous fetch."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic

from request_state._types import D, M
from request_state.exceptions import InvalidConfig

# camelCase spellings accepted for configs coming from JSON front ends
_CONFIG_ALIASES = {
    "clear_data": "clear_data",
    "clear_error": "clear_error",
    "initial_data": "initial_data",
    "clearData": "clear_data",
    "clearError": "clear_error",
    "initialData": "initial_data",
}


class RequestPhase(Enum):
    """Logical phase derived from a record's fields."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestStateConfig(Generic[D]):
    """Construction-time options controlling what transitions clear."""

    clear_data: bool = False
    clear_error: bool = False
    initial_data: D | None = None

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> RequestStateConfig[D]:
        """Build a config from a partial mapping and/or keyword options.

        Keys may be snake_case or camelCase. Omitted keys take their
        defaults; keyword options win over the mapping.
        """
        merged: dict[str, Any] = {}
        for source in (options or {}, kwargs):
            for key, value in source.items():
                name = _CONFIG_ALIASES.get(key)
                if name is None:
                    raise InvalidConfig(f"Unknown config option {key!r}", key=key)
                merged[name] = value

        for flag in ("clear_data", "clear_error"):
            if flag in merged and not isinstance(merged[flag], bool):
                raise InvalidConfig(
                    f"Config option {flag!r} must be a bool, "
                    f"got {type(merged[flag]).__name__}",
                    key=flag,
                )

        return cls(**merged)


@dataclass
class RequestState(Generic[D, M]):
    """Plain mutable record; transitions never modify it in place."""

    config: RequestStateConfig[D] = field(default_factory=RequestStateConfig)
    initialized: bool = False
    data: D | None = None
    error: Any | None = None
    pending: bool = False
    meta: M | None = None

    @property
    def phase(self) -> RequestPhase:
        """Derived phase. A ``None`` error reads as SUCCEEDED, even after ``failed``."""
        if not self.initialized:
            return RequestPhase.IDLE
        if self.pending:
            return RequestPhase.PENDING
        if self.error is not None:
            return RequestPhase.FAILED
        return RequestPhase.SUCCEEDED
