from numbers import Number
from typing import Any

__all__ = ["is_valid_key"]

# scalar values have no identity that could serve as a key
invalid_key_types: Any = (bool, Number, bytes, bytearray, type(None))


def is_valid_key(value: Any) -> bool:
    """Check if value can be used as a map key.

    Valid keys are strings and object references. Other scalars like numbers,
    booleans, byte strings and None are rejected.
    """
    return isinstance(value, str) or not isinstance(value, invalid_key_types)
