from decimal import Decimal
from fractions import Fraction

from ordmap.pyutils import is_valid_key


class Node:
    pass


def describe_is_valid_key():
    def strings_are_valid_keys():
        assert is_valid_key("") is True
        assert is_valid_key("key") is True

    def objects_are_valid_keys():
        assert is_valid_key(Node()) is True
        assert is_valid_key(object()) is True
        assert is_valid_key(Node) is True
        assert is_valid_key(is_valid_key) is True

    def collections_are_valid_keys():
        assert is_valid_key([]) is True
        assert is_valid_key({}) is True
        assert is_valid_key((1, 2)) is True
        assert is_valid_key({1, 2}) is True

    def none_is_not_a_valid_key():
        assert is_valid_key(None) is False

    def booleans_are_not_valid_keys():
        assert is_valid_key(True) is False
        assert is_valid_key(False) is False

    def numbers_are_not_valid_keys():
        for number in 0, 1, -1, 1.5, float("nan"), 2j, Decimal(1), Fraction(1, 2):
            assert is_valid_key(number) is False

    def byte_strings_are_not_valid_keys():
        assert is_valid_key(b"key") is False
        assert is_valid_key(bytearray(b"key")) is False

    def string_subclasses_are_valid_keys():
        class Name(str):
            pass

        assert is_valid_key(Name("key")) is True
