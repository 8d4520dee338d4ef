from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional
import math
import re

from fluent_collection.Exceptions import InvalidArgumentException, InvalidKeyException
from fluent_collection.Support.Types import Key

_INTEGER_KEY = re.compile(r'0|-?[1-9][0-9]*')


class Arr:
    """Helpers for ordered key => value dictionaries with sparse-array keys."""

    @staticmethod
    def normalize_key(key: Any) -> Key:
        """Cast a key the way a sparse array stores it.

        Booleans become 0/1, floats are truncated, None becomes "" and
        strings holding a canonical decimal integer ("7", "-3", but not "07")
        become ints.
        """
        if key is None:
            return ''
        if isinstance(key, bool):
            return int(key)
        if isinstance(key, int):
            return key
        if isinstance(key, float):
            if not math.isfinite(key):
                raise InvalidKeyException(key)
            return int(key)
        if isinstance(key, str):
            if _INTEGER_KEY.fullmatch(key):
                return int(key)
            return key
        raise InvalidKeyException(key)

    @staticmethod
    def next_index(keys: Iterable[Key], current: int = 0) -> int:
        """Get the next free integer key given the keys seen so far."""
        result = current
        for key in keys:
            if isinstance(key, int) and key >= result:
                result = key + 1
        return result

    @staticmethod
    def normalize(items: Dict[Any, Any]) -> Dict[Key, Any]:
        """Copy a dictionary, casting every key."""
        return {Arr.normalize_key(key): value for key, value in items.items()}

    @staticmethod
    def chunk(items: Dict[Key, Any], size: int) -> List[Dict[Key, Any]]:
        """Split an ordered dictionary into consecutive pieces, keeping keys."""
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidArgumentException(
                f"Chunk size must be a positive integer, got {size!r}."
            )

        chunks: List[Dict[Key, Any]] = []
        current: Dict[Key, Any] = {}
        for key, value in items.items():
            current[key] = value
            if len(current) == size:
                chunks.append(current)
                current = {}
        if current:
            chunks.append(current)
        return chunks

    @staticmethod
    def reverse(items: Dict[Key, Any]) -> Dict[Key, Any]:
        """Reverse an ordered dictionary, keeping each key with its value."""
        return dict(reversed(list(items.items())))

    @staticmethod
    def first(items: Dict[Key, Any], default: Any = None) -> Any:
        """Get the first value of an ordered dictionary."""
        for value in items.values():
            return value
        return default

    @staticmethod
    def last(items: Dict[Key, Any], default: Any = None) -> Any:
        """Get the last value of an ordered dictionary."""
        for value in reversed(items.values()):
            return value
        return default

    @staticmethod
    def string_form(value: Any) -> str:
        """Cast a value to the string used when it becomes a group key.

        Whole-number floats drop their fraction, so 5 and 5.0 share a group.
        """
        if value is None:
            return ''
        if isinstance(value, bool):
            return '1' if value else ''
        if isinstance(value, float) and math.isfinite(value) and value.is_integer():
            return str(int(value))
        return str(value)

    @staticmethod
    def get(items: Dict[Key, Any], key: Any, default: Optional[Any] = None) -> Any:
        """Get a value by key, casting the key first."""
        try:
            normalized = Arr.normalize_key(key)
        except InvalidKeyException:
            return default
        return items.get(normalized, default)
