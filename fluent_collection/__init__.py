"""Fluent, chainable collections over ordered key => value data."""

from .Support.Collection import Collection, collect
from .Support.Access import access
from .Support.Json import CollectionJSONEncoder
from .Exceptions import (
    CollectionException,
    FieldAccessException,
    NonNumericValueException,
    EmptyCollectionException,
    InvalidArgumentException,
    InvalidOperatorException,
    InvalidKeyException,
    UncomparableValuesException,
)

__version__ = "1.0.0"

__all__ = [
    "Collection",
    "collect",
    "access",
    "CollectionJSONEncoder",
    "CollectionException",
    "FieldAccessException",
    "NonNumericValueException",
    "EmptyCollectionException",
    "InvalidArgumentException",
    "InvalidOperatorException",
    "InvalidKeyException",
    "UncomparableValuesException",
]
