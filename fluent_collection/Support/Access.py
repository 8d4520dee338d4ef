"""
Field access over items of unknown shape.

A collection may hold dictionaries, plain objects, dataclasses, pydantic
models, nested lists or bare scalars side by side. Every keyed operation
(where*, sum, avg, pluck_column, key_by, group_by, sort_by) reads fields
through ``access`` so that each shape is handled by exactly one branch:

- scalars have no fields and always yield the default
- mappings are looked up by key
- sequences are indexed by an integer (or decimal string) field
- anything else is treated as a record and read by attribute
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Final

from fluent_collection.Exceptions import FieldAccessException, InvalidKeyException
from fluent_collection.Support.Arr import Arr


class _Missing:
    """Marker for an omitted default."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()
MISSING_FIELD: Final = _Missing()

_SCALARS = (str, bytes, bytearray, int, float, complex, bool, type(None), Enum)


class ItemShape(Enum):
    """The shapes an item can take when one of its fields is read."""
    SCALAR = 'scalar'
    MAPPING = 'mapping'
    SEQUENCE = 'sequence'
    RECORD = 'record'


def shape_of(item: Any) -> ItemShape:
    """Classify an item for field access."""
    # Imported here to avoid a cycle; Collection itself reads fields through access()
    from fluent_collection.Support.Collection import Collection

    if isinstance(item, _SCALARS):
        return ItemShape.SCALAR
    if isinstance(item, Mapping):
        return ItemShape.MAPPING
    if isinstance(item, (Sequence, Collection)):
        return ItemShape.SEQUENCE
    return ItemShape.RECORD


def access(item: Any, field: Any, default: Any = MISSING) -> Any:
    """Read ``field`` from ``item``.

    Scalars return ``default`` (None when omitted). For records, mappings and
    sequences a missing field returns ``default`` when one is given and
    raises FieldAccessException otherwise.
    """
    shape = shape_of(item)

    if shape is ItemShape.SCALAR:
        return None if default is MISSING else default

    if shape is ItemShape.MAPPING:
        if field in item:
            return item[field]
        return _missing(item, field, default)

    if shape is ItemShape.SEQUENCE:
        return _access_sequence(item, field, default)

    if isinstance(field, str) and hasattr(item, field):
        return getattr(item, field)
    return _missing(item, field, default)


def has_field(item: Any, field: Any) -> bool:
    """Check if ``item`` exposes ``field``. Scalars never do."""
    if shape_of(item) is ItemShape.SCALAR:
        return False
    return access(item, field, MISSING_FIELD) is not MISSING_FIELD


def _access_sequence(item: Any, field: Any, default: Any) -> Any:
    from fluent_collection.Support.Collection import Collection

    if isinstance(item, Collection):
        if item.has(field):
            return item.get(field)
        return _missing(item, field, default)

    try:
        index = Arr.normalize_key(field)
    except InvalidKeyException:
        return _missing(item, field, default)

    if isinstance(index, int) and 0 <= index < len(item):
        return item[index]
    return _missing(item, field, default)


def _missing(item: Any, field: Any, default: Any) -> Any:
    if default is MISSING:
        raise FieldAccessException(field, item)
    return default
