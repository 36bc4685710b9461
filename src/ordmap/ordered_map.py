"""An ordered map with string and object keys"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from copy import deepcopy
from functools import cmp_to_key
from typing import Any, Callable, Generic, TypeVar

from .error import InvalidKeyError, KeyNotFoundError
from .pyutils import inspect, is_collection, is_mapping, is_valid_key, key_ref

__all__ = ["OrderedMap", "Comparator", "Predicate", "Reducer"]

K = TypeVar("K")
V = TypeVar("V")

Comparator = Callable[[Any, Any], int]
Predicate = Callable[[Any, Any], Any]
Reducer = Callable[[str, Any, Any], str]


class OrderedMap(Generic[K, V]):
    """An ordered map with string and object keys.

    The map keeps its entries in insertion order. Only :meth:`sort` changes the
    order of existing entries, overwriting the value of a key keeps its position.

    Keys can be strings or object references. Strings are compared by value,
    all other keys by identity, so two distinct objects with equal contents are
    distinct keys. Scalars like numbers, booleans and None are rejected.

    Lookups of missing keys do not raise errors but return ``False`` by default,
    use :meth:`exists` to tell a missing entry from a stored falsy value. Only
    :meth:`remove` raises a :class:`KeyNotFoundError` for missing keys.

    Subscripts work like the named methods: ``key in m`` is :meth:`exists`,
    ``m[key]`` is :meth:`get`, ``m[key] = value`` is :meth:`set` and
    ``del m[key]`` is :meth:`remove`.
    """

    _entries: dict[Hashable, tuple[K, V]]

    def __init__(
        self,
        items: (
            Mapping[K, V] | OrderedMap[K, V] | Iterable[tuple[K, V]] | None
        ) = None,
    ) -> None:
        self._entries = {}
        if items:
            if isinstance(items, (Mapping, OrderedMap)):
                items = items.items()
            for key, value in items:
                self.set(key, value)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        return self.exists(key)

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        self.remove(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.items()!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        if list(self._entries) != list(other._entries):
            return False
        return all(
            entry[1] == other_entry[1]
            for entry, other_entry in zip(
                self._entries.values(), other._entries.values()
            )
        )

    def __ne__(self, other: Any) -> bool:
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal

    __hash__ = None  # type: ignore

    def __copy__(self) -> OrderedMap[K, V]:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> OrderedMap[K, V]:
        # keys are kept as they are, identity keys must remain the same objects
        map_ = self.__class__()
        memo[id(self)] = map_
        for key, value in self._entries.values():
            map_.set(key, deepcopy(value, memo))
        return map_

    def __reduce__(self) -> tuple:
        # identity tokens are not portable, rebuild the entries from the keys
        return self.__class__, (self.items(),)

    def set(self, key: K, value: V) -> OrderedMap[K, V]:
        """Set the value for the given key.

        New keys are appended, existing keys keep their position.
        """
        if not is_valid_key(key):
            raise InvalidKeyError(key)
        self._entries[key_ref(key)] = (key, value)
        return self

    def get(self, key: Any, default: Any = False) -> Any:
        """Get the value for the given key or the default if there is none."""
        entry = self._entries.get(key_ref(key))
        return default if entry is None else entry[1]

    def all(self) -> list[V]:
        """Get a list of all values in the map."""
        return [entry[1] for entry in self._entries.values()]

    def keys(self) -> list[K]:
        """Get a list of all keys in the map."""
        return [entry[0] for entry in self._entries.values()]

    def items(self) -> list[tuple[K, V]]:
        """Get a list of all key/value-pairs in the map."""
        return list(self._entries.values())

    def sort(self, comparator: Comparator) -> OrderedMap[K, V]:
        """Sort the entries in place by their keys.

        The comparator gets two keys and must return a negative number, zero or
        a positive number, like the ``cmp`` functions of Python 2. The sort is
        stable. If the comparator raises an error, the order remains unchanged.
        """
        sort_key = cmp_to_key(comparator)
        self._entries = dict(
            sorted(self._entries.items(), key=lambda item: sort_key(item[1][0]))
        )
        return self

    def find(self, value: Any) -> Any:
        """Find the key of the first entry that has an equal value.

        Returns False if no such entry exists.
        """
        for key, item in self._entries.values():
            if item == value:
                return key
        return False

    def each(self) -> Iterator[V]:
        """Iterate over the values in the map lazily."""
        for value in self.all():
            yield value

    def count(self) -> int:
        """Get the number of entries in the map."""
        return len(self._entries)

    def clear(self) -> OrderedMap[K, V]:
        """Remove all entries from the map."""
        self._entries.clear()
        return self

    def exists(self, key: Any) -> bool:
        """Check whether the map has an entry for the given key."""
        return key_ref(key) in self._entries

    def remove(self, key: Any) -> OrderedMap[K, V]:
        """Remove the entry for the given key.

        Raises a KeyNotFoundError if the map has no such entry.
        """
        try:
            del self._entries[key_ref(key)]
        except KeyError:
            raise KeyNotFoundError(key) from None
        return self

    def filter(self, predicate: Predicate) -> OrderedMap[K, V]:
        """Get a new map with the entries for which the predicate is true.

        The predicate gets the value and the key of each entry.
        """
        return self.__class__(
            [(key, value) for key, value in self.items() if predicate(value, key)]
        )

    def concat(self, separator: str | Reducer) -> str:
        """Concatenate the values in the map.

        If the separator is a string, the values are converted to strings and
        joined with the separator. If it is a function, it is called with the
        accumulated string, the value and the key of each entry, starting with
        an empty string, and the last result is returned.
        """
        if isinstance(separator, str):
            return separator.join(
                "" if value is None else str(value) for value in self.all()
            )
        result = ""
        if callable(separator):
            for key, value in self.items():
                result = separator(result, value, key)
        return result

    def merge(self, other: OrderedMap, recursive: bool = False) -> OrderedMap:
        """Merge the entries of another map into this map.

        Values of the other map replace the values of keys that exist in both
        maps, keys that only exist in the other map are appended in its order.

        If recursive is set, values of keys existing in both maps are merged
        with :func:`merge_values` instead of being replaced.
        """
        if not isinstance(other, OrderedMap):
            raise TypeError(f"Only maps can be merged, not {inspect(other)}.")
        entries = self._entries
        for token, (key, value) in list(other._entries.items()):
            if recursive and token in entries:
                value = merge_values(entries[token][1], value)
            entries[token] = (key, value)
        return self

    def first(self) -> Any:
        """Get the first value in the map or False if the map is empty."""
        entry = next(iter(self._entries.values()), None)
        return False if entry is None else entry[1]

    def last(self) -> Any:
        """Get the last value in the map or False if the map is empty."""
        entry = next(reversed(self._entries.values()), None)
        return False if entry is None else entry[1]

    def copy(self) -> OrderedMap[K, V]:
        """Get a shallow copy of the map."""
        return self.__class__(self.items())


def merge_values(value: Any, other_value: Any) -> Any:
    """Merge two values of the same key recursively.

    Two ordered maps are merged into a copy of the first map, and two other
    mappings are merged into a new dictionary, both recursively. Any other pair
    of values is combined into a list, where collections like lists and tuples
    contribute their items and all other values contribute themselves.
    """
    if isinstance(value, OrderedMap) and isinstance(other_value, OrderedMap):
        return value.copy().merge(other_value, True)
    if is_mapping(value) and is_mapping(other_value):
        merged: dict[Any, Any] = dict(value)
        for key, item in other_value.items():
            merged[key] = merge_values(merged[key], item) if key in merged else item
        return merged
    return [*_as_list(value), *_as_list(other_value)]


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, OrderedMap) or not is_collection(value):
        return [value]
    return list(value)

