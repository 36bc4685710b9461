from array import array
from collections.abc import Collection, Mapping
from typing import Any

__all__ = ["is_collection", "is_mapping"]

collection_types: Any = Collection
if not issubclass(array, Collection):  # PyPy <= 7.3.9
    collection_types = (Collection, array)
not_collection_types: Any = (bytes, bytearray, memoryview, Mapping, str)


def is_collection(value: Any) -> bool:
    """Check if value is an array-like collection, not a string or a mapping."""
    return isinstance(value, collection_types) and not isinstance(
        value, not_collection_types
    )


def is_mapping(value: Any) -> bool:
    """Check if value is a mapping that can be merged key by key."""
    return isinstance(value, Mapping)
