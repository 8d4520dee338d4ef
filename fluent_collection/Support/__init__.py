from .Collection import Collection, collect
from .Access import access, has_field, MISSING
from .Arr import Arr
from .Config import settings, Settings, env
from .Json import CollectionJSONEncoder, serialize, to_json

__all__ = [
    "Collection",
    "collect",
    "access",
    "has_field",
    "MISSING",
    "Arr",
    "settings",
    "Settings",
    "env",
    "CollectionJSONEncoder",
    "serialize",
    "to_json",
]
