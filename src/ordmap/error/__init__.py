"""Map Errors

The :mod:`ordmap.error` package holds the errors raised by ordered maps.
"""

from .map_error import MapError, InvalidKeyError, KeyNotFoundError

__all__ = ["MapError", "InvalidKeyError", "KeyNotFoundError"]
