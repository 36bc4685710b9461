from pytest import raises

from ordmap.error import InvalidKeyError, KeyNotFoundError, MapError


class Node:
    pass


def describe_map_error():
    def is_a_class_and_is_a_subclass_of_exception():
        assert type(MapError) is type
        assert issubclass(MapError, Exception)
        assert isinstance(MapError("str"), Exception)

    def has_a_message():
        e = MapError("msg")
        assert e.message == "msg"
        assert str(e) == "msg"
        assert e.args == ("msg",)

    def has_a_repr():
        assert repr(MapError("msg")) == "MapError('msg')"
        assert repr(KeyNotFoundError("a")) == (
            "KeyNotFoundError('The map has no key named \"a\"')"
        )

    def compares_by_class_and_message():
        assert MapError("msg") == MapError("msg")
        assert MapError("msg") != MapError("other")
        assert MapError("msg") != Exception("msg")
        assert KeyNotFoundError("a") == KeyNotFoundError("a")
        assert KeyNotFoundError("a") != KeyNotFoundError("b")
        assert KeyNotFoundError("a") != MapError('The map has no key named "a"')

    def is_hashable():
        e = MapError("msg")
        assert hash(e) == hash(e)
        assert {e: 1}[e] == 1


def describe_invalid_key_error():
    def is_a_map_error_and_a_type_error():
        e = InvalidKeyError(1)
        assert isinstance(e, MapError)
        assert isinstance(e, TypeError)

    def has_a_fixed_message():
        e = InvalidKeyError(None)
        assert str(e) == "Map key name must be a string or object"
        assert e.message == str(e)

    def keeps_the_key():
        assert InvalidKeyError(1.5).key == 1.5

    def can_be_caught_as_type_error():
        with raises(TypeError):
            raise InvalidKeyError(1)


def describe_key_not_found_error():
    def is_a_map_error_and_a_key_error():
        e = KeyNotFoundError("a")
        assert isinstance(e, MapError)
        assert isinstance(e, KeyError)

    def names_string_keys_verbatim():
        e = KeyNotFoundError("some key")
        assert e.message == 'The map has no key named "some key"'
        assert str(e) == e.message

    def names_object_keys_by_inspection():
        assert str(KeyNotFoundError(Node())) == (
            'The map has no key named "<Node instance>"'
        )
        assert str(KeyNotFoundError([1, 2])) == 'The map has no key named "[1, 2]"'
        assert str(KeyNotFoundError(None)) == 'The map has no key named "None"'

    def keeps_the_key():
        node = Node()
        assert KeyNotFoundError(node).key is node

    def can_be_caught_as_key_error():
        with raises(KeyError) as exc_info:
            raise KeyNotFoundError("a")
        assert str(exc_info.value) == 'The map has no key named "a"'
