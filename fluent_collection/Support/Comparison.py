from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, List
import operator as op

from fluent_collection.Exceptions import InvalidOperatorException, UncomparableValuesException
from fluent_collection.Log.Logger import get_logger
from fluent_collection.Support.Arr import Arr

logger = get_logger(__name__)

_NUMBERS = (int, float)


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that also requires both sides to have the same type.

    Containers are compared element by element under the same rule, so
    ``[1]`` is not strictly equal to ``[1.0]``, and mappings must also
    list their keys in the same order. Objects that do not define
    ``__eq__`` are only equal to themselves.
    """
    if left is right:
        return True
    if type(left) is not type(right):
        return False
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(
            strict_equals(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, Mapping):
        return len(left) == len(right) and all(
            strict_equals(lk, rk) and strict_equals(lv, rv)
            for (lk, lv), (rk, rv) in zip(left.items(), right.items())
        )
    return bool(left == right)


def loose_equals(left: Any, right: Any) -> bool:
    """Coercive equality.

    The coercion rules, applied in order:
    - a bool on either side compares truthiness of both sides
    - None equals any falsy value
    - a number equals a string holding the same number ("5" == 5.0)
    - anything else falls back to ``==``
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return bool(left) == bool(right)
    if left is None or right is None:
        return not left and not right
    if isinstance(left, _NUMBERS) and isinstance(right, str):
        return _numeric_string_equals(right, left)
    if isinstance(right, _NUMBERS) and isinstance(left, str):
        return _numeric_string_equals(left, right)
    return bool(left == right)


def _numeric_string_equals(text: str, number: Any) -> bool:
    try:
        return float(text.strip()) == number
    except ValueError:
        return False


def equals(left: Any, right: Any, strict: bool = True) -> bool:
    """Compare two values strictly or loosely."""
    return strict_equals(left, right) if strict else loose_equals(left, right)


def contains(haystack: Any, needle: Any, strict: bool = True) -> bool:
    """Substring search on strings, membership on sequences, False otherwise."""
    # Collection is imported lazily; it depends on this module
    from fluent_collection.Support.Collection import Collection

    if isinstance(haystack, str):
        text = needle if isinstance(needle, str) else Arr.string_form(needle)
        return text in haystack

    if isinstance(haystack, Collection):
        haystack = haystack.values()

    if isinstance(haystack, (list, tuple, set, frozenset)):
        return any(equals(element, needle, strict) for element in haystack)

    return False


def _ordered(compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    def predicate(left: Any, right: Any) -> bool:
        try:
            return bool(compare(left, right))
        except TypeError:
            logger.debug("Excluded value that cannot be ordered", {
                'left': type(left).__name__,
                'right': type(right).__name__,
            })
            return False
    return predicate


_ORDERINGS: Dict[str, Callable[[Any, Any], bool]] = {
    '<': _ordered(op.lt),
    '<=': _ordered(op.le),
    '>': _ordered(op.gt),
    '>=': _ordered(op.ge),
}

OPERATORS: List[str] = ['=', '!=', '<>', '<', '<=', '>', '>=', 'contains']


def validate_operator(operator: Any) -> str:
    """Make sure an operator is known before any item is compared."""
    if operator not in OPERATORS:
        logger.warning("Rejected unknown where operator", {'operator': str(operator)})
        raise InvalidOperatorException(operator, OPERATORS)
    return str(operator)


def compare_values(left: Any, operator: str, right: Any, strict: bool = True) -> bool:
    """Check ``left <operator> right``. Never raises on mismatched types."""
    if operator == '=':
        return equals(left, right, strict)
    if operator in ('!=', '<>'):
        return not equals(left, right, strict)
    if operator == 'contains':
        return contains(left, right, strict)
    if operator in _ORDERINGS:
        return _ORDERINGS[operator](left, right)
    raise InvalidOperatorException(operator, OPERATORS)


def default_compare(left: Any, right: Any) -> int:
    """Natural ascending order: 0 when equal, -1 when smaller, 1 otherwise."""
    try:
        if left == right:
            return 0
        return -1 if left < right else 1
    except TypeError as exc:
        raise UncomparableValuesException(left, right) from exc
