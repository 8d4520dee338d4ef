from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Mapping, Optional, Union
from functools import cmp_to_key
import inspect
import numbers

from fluent_collection.Exceptions import (
    EmptyCollectionException,
    InvalidArgumentException,
    NonNumericValueException,
)
from fluent_collection.Log.Logger import get_logger
from fluent_collection.Support.Access import access
from fluent_collection.Support.Arr import Arr
from fluent_collection.Support.Comparison import compare_values, default_compare, validate_operator
from fluent_collection.Support.Config import settings
from fluent_collection.Support.Json import serialize, to_json
from fluent_collection.Support.Types import Comparator, Key, T, U

logger = get_logger(__name__)


def _bind(callback: Callable[..., Any], minimum: int = 1) -> Callable[..., Any]:
    """Wrap a callback so it only receives the positional arguments it takes.

    ``map(str.strip)`` must not pass the key as the characters to strip, so
    builtins get their required arguments only, while Python functions get
    as many as they declare.
    """
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return lambda *args: callback(*args[:minimum])

    builtin = (
        inspect.isbuiltin(callback)
        or inspect.ismethoddescriptor(callback)
        or isinstance(callback, type)
    )
    accepted = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return callback
        if parameter.kind not in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            continue
        if builtin and parameter.default is not inspect.Parameter.empty:
            continue
        accepted += 1

    count = max(accepted, minimum)
    return lambda *args: callback(*args[:count])


def _add(total: Any, value: Any, field: Optional[str]) -> Any:
    if not isinstance(value, numbers.Number):
        raise NonNumericValueException(value, field)
    return total + value


class Collection(Generic[T]):
    """Ordered key => value collection with fluent query operations.

    Keys are ints or strings. Values appended without a key get the next
    integer key, which is one more than the largest integer key the
    collection has ever held. Every query or transform returns a new
    collection built through ``make``; only ``add``, ``remove`` and item
    assignment or deletion change a collection in place.
    """

    def __init__(self, items: Union[Mapping[Any, T], Iterable[T], 'Collection[T]', None] = None):
        if items is None:
            self._items: Dict[Key, T] = {}
        elif isinstance(items, Collection):
            self._items = items.all()
        elif isinstance(items, Mapping):
            self._items = Arr.normalize(dict(items))
        else:
            self._items = dict(enumerate(items))
        current = items._next_index if isinstance(items, Collection) else 0
        self._next_index = Arr.next_index(self._items.keys(), current)

    @classmethod
    def make(cls, items: Union[Mapping[Any, Any], Iterable[Any], 'Collection[Any]', None] = None) -> 'Collection[Any]':
        """Create a new collection instance of the same class."""
        return cls(items)

    # Core methods
    def all(self) -> Dict[Key, T]:
        """Get a copy of the key => value dictionary.

        Changing the returned dictionary does not change the collection.
        """
        return self._items.copy()

    def keys(self) -> List[Key]:
        """Get the keys in order."""
        return list(self._items.keys())

    def values(self) -> List[T]:
        """Get the values in order."""
        return list(self._items.values())

    def items(self) -> List[tuple[Key, T]]:
        """Get the (key, value) pairs in order."""
        return list(self._items.items())

    def count(self) -> int:
        """Get the number of items."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return len(self._items) == 0

    def is_not_empty(self) -> bool:
        """Check if the collection is not empty."""
        return not self.is_empty()

    def first(self, default: Any = None) -> Any:
        """Get the first value."""
        return Arr.first(self._items, default)

    def last(self, default: Any = None) -> Any:
        """Get the last value."""
        return Arr.last(self._items, default)

    # Adding/Removing items
    def add(self, value: T, key: Optional[Any] = None) -> 'Collection[T]':
        """Set ``value`` at ``key``, or append it at the next integer key.

        An existing key keeps its position; only its value changes.
        """
        if key is None:
            key = self._next_index
        else:
            key = Arr.normalize_key(key)
        self._items[key] = value
        if isinstance(key, int) and key >= self._next_index:
            self._next_index = key + 1
        return self

    def get(self, key: Any, default: Any = None) -> Any:
        """Get the value at ``key``, or ``default``."""
        return Arr.get(self._items, key, default)

    def has(self, key: Any) -> bool:
        """Check if ``key`` exists."""
        sentinel = object()
        return Arr.get(self._items, key, sentinel) is not sentinel

    def remove(self, key: Any) -> 'Collection[T]':
        """Remove the entry at ``key`` if there is one."""
        if self.has(key):
            del self._items[Arr.normalize_key(key)]
        return self

    # Transforming
    def map(self, callback: Callable[..., U]) -> 'Collection[U]':
        """Transform values with ``callback(value, key)``, keeping keys."""
        call = _bind(callback)
        return self.make({key: call(value, key) for key, value in self._items.items()})

    def each(self, callback: Callable[..., Any]) -> 'Collection[T]':
        """Call ``callback(value, key)`` for each entry until it returns False."""
        call = _bind(callback)
        for key, value in self._items.items():
            if call(value, key) is False:
                break
        return self

    def filter(self, callback: Callable[..., Any], *args: Any) -> 'Collection[T]':
        """Keep the entries for which ``callback(value, key, *args)`` returns True.

        Only the ``True`` object itself keeps an entry; truthy results such as
        ``1`` or ``"yes"`` do not.
        """
        call = callback if args else _bind(callback)
        return self.make({
            key: value
            for key, value in self._items.items()
            if call(value, key, *args) is True
        })

    def reduce(self, callback: Callable[..., Any], initial: Any) -> Any:
        """Fold ``callback(carry, value, key)`` over the entries in order."""
        call = _bind(callback, minimum=2)
        result = initial
        for key, value in self._items.items():
            result = call(result, value, key)
        return result

    # Aggregating
    def sum(self, key: Optional[str] = None) -> Any:
        """Sum the values, or the ``key`` field of each value."""
        if key is None:
            return self.reduce(lambda total, value: _add(total, value, None), 0)
        return self.reduce(lambda total, item: _add(total, access(item, key), key), 0)

    def avg(self, key: Optional[str] = None) -> Any:
        """Average the values, or the ``key`` field of each value."""
        if self.is_empty():
            raise EmptyCollectionException('avg')
        return self.sum(key) / self.count()

    # Filtering
    def where(self, key: str, value: Any, operator: str = '=', strict: Optional[bool] = None) -> 'Collection[T]':
        """Keep the items whose ``key`` field satisfies ``operator`` against ``value``.

        Operators: ``=``, ``!=``/``<>``, ``<``, ``<=``, ``>``, ``>=`` and
        ``contains`` (substring for string fields, membership for list
        fields). ``strict`` controls equality for ``=``, ``!=`` and list
        membership; it defaults to the STRICT_COMPARISON setting.
        """
        operator = validate_operator(operator)
        if strict is None:
            strict = settings.STRICT_COMPARISON

        return self.filter(
            lambda item: compare_values(access(item, key), operator, value, strict)
        )

    def where_equals(self, key: str, value: Any, strict: Optional[bool] = None) -> 'Collection[T]':
        return self.where(key, value, '=', strict)

    def where_not_equals(self, key: str, value: Any, strict: Optional[bool] = None) -> 'Collection[T]':
        return self.where(key, value, '!=', strict)

    def where_less(self, key: str, value: Any) -> 'Collection[T]':
        return self.where(key, value, '<')

    def where_less_or_equal(self, key: str, value: Any) -> 'Collection[T]':
        return self.where(key, value, '<=')

    def where_greater(self, key: str, value: Any) -> 'Collection[T]':
        return self.where(key, value, '>')

    def where_greater_or_equal(self, key: str, value: Any) -> 'Collection[T]':
        return self.where(key, value, '>=')

    def where_contains(self, key: str, value: Any, strict: Optional[bool] = None) -> 'Collection[T]':
        return self.where(key, value, 'contains', strict)

    # Grouping and partitioning
    def group_by(self, key: str, keep_keys: bool = False) -> 'Collection[Collection[T]]':
        """Group items into collections by the string form of their ``key`` field.

        Groups appear in the order their value is first seen. With
        ``keep_keys`` the items keep their original keys inside each group,
        otherwise they are numbered from 0.
        """
        groups: Dict[Key, Collection[T]] = {}
        for item_key, item in self._items.items():
            group_key = Arr.normalize_key(Arr.string_form(access(item, key)))
            if group_key not in groups:
                groups[group_key] = self.make()
            if keep_keys:
                groups[group_key].add(item, item_key)
            else:
                groups[group_key].add(item)
        return self.make(groups)

    def group_by_callback(self, callback: Callable[[T], Any]) -> 'Collection[List[T]]':
        """Group items into lists keyed by ``callback(item)``."""
        groups: Dict[Key, List[T]] = {}
        for item in self._items.values():
            group_key = Arr.normalize_key(callback(item))
            groups.setdefault(group_key, []).append(item)
        return self.make(groups)

    def chunk(self, size: int) -> 'Collection[Collection[T]]':
        """Break the collection into collections of ``size`` entries, keeping keys."""
        try:
            chunks = Arr.chunk(self._items, size)
        except InvalidArgumentException:
            logger.warning("Rejected chunk size", {'size': repr(size)})
            raise
        return self.make([self.make(chunk) for chunk in chunks])

    # Plucking
    def pluck_column(self, key: str) -> 'Collection[Any]':
        """Replace every item with its ``key`` field, keeping keys."""
        return self.make({
            item_key: access(item, key)
            for item_key, item in self._items.items()
        })

    def key_by(self, key: str) -> 'Collection[T]':
        """Re-key the items by their ``key`` field. Later items win on collisions."""
        result: Dict[Key, T] = {}
        for item in self._items.values():
            new_key = Arr.normalize_key(access(item, key))
            if new_key in result:
                logger.debug("key_by replaced an item with a duplicate key", {'key': new_key})
            result[new_key] = item
        return self.make(result)

    # Sorting
    def sort(self, callback: Optional[Comparator] = None) -> 'Collection[T]':
        """Stable sort by value; each value keeps its key.

        ``callback(a, b)`` returns a negative number, zero or a positive
        number. Without one, values are sorted in natural ascending order.
        Values of unrelated types (for example ``1`` and ``"a"``) cannot be
        sorted without a callback.
        """
        compare = callback or default_compare
        entries = sorted(
            self._items.items(),
            key=cmp_to_key(lambda a, b: compare(a[1], b[1])),
        )
        return self.make(dict(entries))

    def sort_by(self, key: str) -> 'Collection[T]':
        """Stable sort by the ``key`` field of each item."""
        return self.sort(lambda a, b: default_compare(access(a, key), access(b, key)))

    def sort_by_desc(self, key: str) -> 'Collection[T]':
        """Stable sort by the ``key`` field of each item, largest first."""
        entries = sorted(
            self._items.items(),
            key=cmp_to_key(lambda a, b: default_compare(access(a[1], key), access(b[1], key))),
            reverse=True,
        )
        return self.make(dict(entries))

    def reverse(self) -> 'Collection[T]':
        """Reverse the order of the entries, keeping each key with its value."""
        return self.make(Arr.reverse(self._items))

    # Serialization
    def to_serializable(self) -> List[Any]:
        """Get the values as a plain list, with nested collections expanded."""
        return [serialize(value) for value in self._items.values()]

    def to_json(self, **kwargs: Any) -> str:
        """Convert collection to JSON."""
        return to_json(self, **kwargs)

    # Magic methods
    def __iter__(self) -> Iterator[T]:
        """Iterate over values."""
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: Any) -> bool:
        """Check if a key exists."""
        return self.has(key)

    def __getitem__(self, key: Any) -> T:
        """Get value by key."""
        sentinel = object()
        value = Arr.get(self._items, key, sentinel)
        if value is sentinel:
            raise KeyError(key)
        return value

    def __setitem__(self, key: Any, value: T) -> None:
        """Set value by key; a None key appends."""
        self.add(value, key)

    def __delitem__(self, key: Any) -> None:
        """Remove value by key."""
        self.remove(key)

    def __eq__(self, other: object) -> bool:
        """Collections are equal when they hold the same entries in the same order."""
        if not isinstance(other, Collection):
            return NotImplemented
        return list(self._items.items()) == list(other._items.items())

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        """Check if collection is not empty."""
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items})"

    def __str__(self) -> str:
        return str(self._items)


# Helper function
def collect(items: Union[Mapping[Any, T], Iterable[T], None] = None) -> Collection[T]:
    """Create a collection instance."""
    return Collection.make(items)
