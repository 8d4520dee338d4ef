from __future__ import annotations

from typing import Any, List, Optional


class CollectionException(Exception):
    """Base exception for Collection"""
    pass


class FieldAccessException(CollectionException, LookupError):
    """Exception raised when a record item has no such field"""

    def __init__(self, field: Any, item: Any) -> None:
        self.field = field
        self.item = item

        super().__init__(
            f"Field `{field}` does not exist on item of type `{type(item).__name__}`."
        )


class NonNumericValueException(CollectionException, TypeError):
    """Exception raised when an aggregate meets a value it cannot add"""

    def __init__(self, value: Any, field: Optional[str] = None) -> None:
        self.value = value
        self.field = field

        where = f" in field `{field}`" if field is not None else ""
        super().__init__(
            f"Cannot aggregate non-numeric value {value!r}{where}."
        )


class EmptyCollectionException(CollectionException, ZeroDivisionError):
    """Exception raised when an average is requested on an empty collection"""

    def __init__(self, operation: str = "avg") -> None:
        self.operation = operation
        super().__init__(f"Cannot compute `{operation}` of an empty collection.")


class InvalidArgumentException(CollectionException, ValueError):
    """Exception raised when an operation receives an unusable argument"""
    pass


class InvalidOperatorException(InvalidArgumentException):
    """Exception raised when an unknown comparison operator is used"""

    def __init__(self, operator: Any, allowed_operators: List[str]) -> None:
        self.operator = operator
        self.allowed_operators = allowed_operators

        allowed_str = ", ".join(allowed_operators)

        super().__init__(
            f"Requested operator `{operator}` is not allowed. "
            f"Allowed operator(s) are `{allowed_str}`."
        )


class InvalidKeyException(InvalidArgumentException):
    """Exception raised when a key is neither a string nor an integer"""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(
            f"Illegal key {key!r} of type `{type(key).__name__}`. Keys must be str or int."
        )


class UncomparableValuesException(CollectionException, TypeError):
    """Exception raised when the default ordering meets values of unrelated types"""

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot order `{type(left).__name__}` against `{type(right).__name__}`."
        )


__all__ = [
    "CollectionException",
    "FieldAccessException",
    "NonNumericValueException",
    "EmptyCollectionException",
    "InvalidArgumentException",
    "InvalidOperatorException",
    "InvalidKeyException",
    "UncomparableValuesException",
]
