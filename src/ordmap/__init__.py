"""ordmap

An ordered map for Python with string and object identity keys.

The map keeps its entries in insertion order and offers convenience methods for
looking up, iterating, filtering, concatenating, merging and sorting entries::

    >>> from ordmap import OrderedMap
    >>> m = OrderedMap([("b", 2), ("a", 1)])
    >>> m.set("c", 3).sort(lambda a, b: (a > b) - (a < b)).keys()
    ['a', 'b', 'c']
"""

# The ordmap package version.
from .version import version, version_info

# The primary class.
from .ordered_map import OrderedMap, Comparator, Predicate, Reducer

# Errors raised by the map.
from .error import MapError, InvalidKeyError, KeyNotFoundError

# Sentinel for telling missing entries from stored falsy values.
from .pyutils import Undefined, UndefinedType

__version__ = version

__all__ = [
    "version",
    "version_info",
    "__version__",
    "OrderedMap",
    "Comparator",
    "Predicate",
    "Reducer",
    "MapError",
    "InvalidKeyError",
    "KeyNotFoundError",
    "Undefined",
    "UndefinedType",
]
