"""
Collection Type System

Shared typing vocabulary for the collection package:
- Generic type variables
- Key and comparator aliases
- Protocol-based interfaces for serializable items
"""

from __future__ import annotations

from collections.abc import Callable
from typing import (
    Any,
    Protocol,
    TypeAlias,
    TypeVar,
    Union,
    runtime_checkable,
)

T = TypeVar("T")
U = TypeVar("U")

# A key is either a string or an integer, never anything else
Key: TypeAlias = Union[int, str]

Comparator: TypeAlias = Callable[[Any, Any], int]


@runtime_checkable
class Serializable(Protocol):
    """Protocol for objects that can describe themselves as plain data."""

    def to_serializable(self) -> Any:
        """Return a plain nested structure of lists, dicts and scalars."""
        ...


__all__ = [
    "T",
    "U",
    "Key",
    "Comparator",
    "Serializable",
]
