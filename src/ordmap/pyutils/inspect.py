from inspect import (
    isclass,
    ismethod,
    isfunction,
    isgeneratorfunction,
    isgenerator,
)
from typing import Any

from .undefined import Undefined

__all__ = ["inspect"]

max_recursive_depth = 2
max_str_size = 240
max_list_size = 10


def inspect(value: Any) -> str:
    """Inspect value and a return string representation for error messages.

    Used to print keys and values in error messages. We do not use repr() in order
    to not leak too much of the inner Python representation of unknown objects.
    """
    return inspect_recursive(value, [])


def inspect_recursive(value: Any, seen_values: list) -> str:
    if value is None or value is Undefined or isinstance(value, (bool, float, int)):
        return repr(value)
    if isinstance(value, (str, bytes, bytearray)):
        return trunc_str(repr(value))
    if len(seen_values) < max_recursive_depth and value not in seen_values:
        # check if we have a custom inspect method
        inspect_method = getattr(value, "__inspect__", None)
        if inspect_method is not None and callable(inspect_method):
            inspected = inspect_method()
            return (
                inspected
                if isinstance(inspected, str)
                else inspect_recursive(inspected, seen_values + [value])
            )
        # recursively inspect collections
        if isinstance(value, (list, tuple, dict)):
            if not value:
                return repr(value)
            seen_values = seen_values + [value]
            if isinstance(value, dict):
                items = [
                    inspect_recursive(key, seen_values)
                    + ": "
                    + inspect_recursive(item, seen_values)
                    for key, item in trunc_list(list(value.items()))
                ]
                return "{" + ", ".join(items) + "}"
            items = [
                inspect_recursive(item, seen_values) for item in trunc_list(value)
            ]
            if isinstance(value, tuple):
                if len(items) == 1:
                    return f"({items[0]},)"
                return f"({', '.join(items)})"
            return f"[{', '.join(items)}]"
    else:
        # handle collections that are nested too deep
        if isinstance(value, (list, tuple, dict)):
            if not value:
                return repr(value)
            if isinstance(value, list):
                return "[...]"
            if isinstance(value, tuple):
                return "(...)"
            return "{...}"
    if isinstance(value, Exception):
        type_ = "exception"
        value = type(value)
    elif isclass(value):
        type_ = "exception class" if issubclass(value, Exception) else "class"
    elif ismethod(value):
        type_ = "method"
    elif isgeneratorfunction(value):
        type_ = "generator function"
    elif isfunction(value):
        type_ = "function"
    elif isgenerator(value):
        type_ = "generator"
    else:
        name = getattr(type(value), "__name__", None)
        if not name or "<" in name or ">" in name:
            return "<object>"
        return f"<{name} instance>"
    name = getattr(value, "__name__", None)
    if not name or "<" in name or ">" in name:
        return f"<{type_}>"
    return f"<{type_} {name}>"


def trunc_str(s: str) -> str:
    """Truncate strings to maximum length."""
    if len(s) > max_str_size:
        i = max(0, (max_str_size - 3) // 2)
        j = max(0, max_str_size - 3 - i)
        s = s[:i] + "..." + s[-j:]
    return s


def trunc_list(s: list) -> list:
    """Truncate lists to maximum length."""
    if len(s) > max_list_size:
        i = max_list_size // 2
        j = i - 1
        s = s[:i] + [ELLIPSIS] + s[-j:]
    return s


class InspectEllipsisType:
    """Singleton class for indicating ellipses in iterables."""

    def __repr__(self) -> str:
        return "..."

    __inspect__ = __repr__


ELLIPSIS = InspectEllipsisType()
