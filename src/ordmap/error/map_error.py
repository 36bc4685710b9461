"""Map Errors"""

from __future__ import annotations

from typing import Any

from ..pyutils import inspect

__all__ = ["MapError", "InvalidKeyError", "KeyNotFoundError"]


class MapError(Exception):
    """Map Error

    Base class of the errors raised by an ordered map. In addition to being an
    exception, it carries the message that describes what went wrong.
    """

    message: str
    """A message describing the error"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, MapError)
            and self.__class__ == other.__class__
            and self.message == other.message
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    __hash__ = Exception.__hash__


class InvalidKeyError(MapError, TypeError):
    """A MapError raised for keys that are neither strings nor objects."""

    key: Any
    """The rejected key"""

    def __init__(self, key: Any) -> None:
        super().__init__("Map key name must be a string or object")
        self.key = key


class KeyNotFoundError(MapError, KeyError):
    """A MapError raised when removing a key that the map does not have.

    This is also a KeyError, so it can be caught like the error of a dictionary.
    """

    key: Any
    """The missing key"""

    def __init__(self, key: Any) -> None:
        name = key if isinstance(key, str) else inspect(key)
        super().__init__(f'The map has no key named "{name}"')
        self.key = key
