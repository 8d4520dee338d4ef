from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from typing import Any
import json

from pydantic import BaseModel

from fluent_collection.Support.Types import Serializable


def serialize(value: Any) -> Any:
    """Replace serializable values with their plain form, recursively.

    Collections and anything else with ``to_serializable()`` describe
    themselves; pydantic models are dumped; dictionaries, lists and tuples
    are walked. Every other value is returned untouched for the encoder.
    """
    if isinstance(value, Serializable):
        return value.to_serializable()
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, Mapping):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return value


class CollectionJSONEncoder(json.JSONEncoder):
    """JSON encoder that understands collections and plain record objects."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Serializable):
            return o.to_serializable()
        if isinstance(o, BaseModel):
            return o.model_dump(mode='json')
        if is_dataclass(o) and not isinstance(o, type):
            return asdict(o)
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, (set, frozenset)):
            return list(o)
        if hasattr(o, '__dict__'):
            return {k: v for k, v in vars(o).items() if not k.startswith('_')}
        return super().default(o)


def to_json(value: Any, **kwargs: Any) -> str:
    """Encode a value, collections included, as JSON text."""
    kwargs.setdefault('cls', CollectionJSONEncoder)
    return json.dumps(value, **kwargs)
