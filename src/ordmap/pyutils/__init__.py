"""Python Utils

This package contains dependency-free Python utility functions used by the
container.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .inspect import inspect
from .is_collection import is_collection, is_mapping
from .is_valid_key import is_valid_key
from .key_ref import KeyRef, key_ref
from .undefined import Undefined, UndefinedType

__all__ = [
    "inspect",
    "is_collection",
    "is_mapping",
    "is_valid_key",
    "KeyRef",
    "key_ref",
    "Undefined",
    "UndefinedType",
]
