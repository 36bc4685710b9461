from typing import Any, Hashable, NamedTuple

__all__ = ["KeyRef", "key_ref"]


class KeyRef(NamedTuple):
    """Token standing in for an object key in the internal dictionary.

    Two tokens are equal only when they have been created for the same object.
    The map holds a reference to the object itself for as long as the entry
    exists, so its id cannot be reused by another object in the meantime.
    """

    id: int


def key_ref(key: Any) -> Hashable:
    """Get the lookup token for the given key.

    Strings are looked up by value, all other keys by identity.
    """
    return key if isinstance(key, str) else KeyRef(id(key))
