import collections
import enum

import pytest

from convertkit.traits import can_call, has_member, is_char, is_space, is_string, to_upper


class Direction(enum.Enum):
    UP = "up"
    DN = "dn"


class MyString(collections.UserString):
    pass


class Test01:
    def __init__(self):
        self.begin = 0


class Test02:
    def begin(self):
        return None


class Test03:
    begin: int


class Test05:
    def begin(self):
        return None


class Test08(Test05):
    pass


class Test11:
    def __init__(self):
        self.no_begin = 0


class Test12:
    def no_begin(self):
        return None


class Callable1:
    def __call__(self, d, s):
        return 0


class Callable5:
    def __call__(self, i, s=""):
        return ""


class Callable6:
    def __call__(self, value):
        return value


class Callable21:
    def zoo(self):
        return None


class Callable22:
    def __call__(self):
        return None


class Func11:
    def func(self, d, s):
        return 0


class Func15:
    def func(self, i, s=""):
        return ""


class Static:
    @staticmethod
    def func(x):
        return x


def test_is_string():
    assert is_string(Direction.UP) is False
    assert is_string("text") is True
    assert is_string(MyString("123")) is True
    assert is_string(5) is False
    assert is_string(["a", "b"]) is True
    assert is_string([1, 2]) is False


def test_is_char():
    assert is_char("a") is True
    assert is_char("ab") is False
    assert is_char(5) is False


def test_is_space_and_to_upper():
    assert is_space(" ") is True
    assert is_space("\t") is True
    assert is_space("a") is False
    assert to_upper("a") == "A"
    assert to_upper("ß") == "ß"
    with pytest.raises(TypeError):
        is_space("ab")
    with pytest.raises(TypeError):
        to_upper(1)


def test_has_member_true():
    assert has_member(Test01(), "begin") is True
    assert has_member(Test02, "begin") is True
    assert has_member(Test03, "begin") is True
    assert has_member(Test05, "begin") is True
    assert has_member(Test08, "begin") is True
    assert has_member(str, "__iter__") is True
    assert has_member(list, "__iter__") is True


def test_has_member_false():
    assert has_member(Test11(), "begin") is False
    assert has_member(Test12, "begin") is False
    assert has_member(int, "__iter__") is False


def test_has_call_operator():
    assert has_member(Callable21, "__call__") is False
    assert has_member(Callable22, "__call__") is True
    assert has_member(Callable1, "__call__") is True


def test_can_call_operator_arity():
    assert can_call(Callable1, "__call__", 1.0, "s") is True
    assert can_call(Callable1, "__call__", 1, "s") is True
    assert can_call(Callable1, "__call__", 1.0) is False
    assert can_call(Callable1(), "__call__", 1.0, "s") is True


def test_can_call_default_argument():
    assert can_call(Callable5, "__call__", 1, "s") is True
    assert can_call(Callable5, "__call__", 1) is True
    assert can_call(Callable5, "__call__") is False


def test_can_call_generic():
    assert can_call(Callable6, "__call__", 1) is True
    assert can_call(Callable6, "__call__", "s") is True


def test_can_call_missing_or_not_callable():
    assert can_call(Callable21, "__call__") is False
    assert can_call(Callable22, "__call__") is True
    assert can_call(Test01(), "begin") is False


def test_can_call_named_function():
    assert can_call(Func11, "func", 1.0, "s") is True
    assert can_call(Func11, "func", 1.0) is False
    assert can_call(Func15(), "func", 1) is True
    assert can_call(Static, "func", 1) is True
    assert can_call(Static, "func") is False