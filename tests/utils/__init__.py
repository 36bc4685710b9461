"""Test utilities"""

from .assert_consistent_map import assert_consistent_map

__all__ = ["assert_consistent_map"]
