"""Shared type variables and the omitted-argument sentinel."""

from __future__ import annotations

from enum import Enum
from typing import Final, TypeVar

# Payload and metadata carried by a RequestState
D = TypeVar("D")
M = TypeVar("M")


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset.UNSET
