import enum

import pytest

from convertkit.core import ConversionError, convert, set_default_converter
from convertkit.lexical import BadLexicalCast, LexicalCast, lexical_cast


class Change(enum.Enum):
    NO = "no"
    UP = "up"
    DN = "dn"

    def __str__(self):
        return self.value


@pytest.fixture
def lexical_default():
    previous = set_default_converter(LexicalCast())
    yield
    set_default_converter(previous)


def test_default_converter_cases(lexical_default):
    assert convert(int, "not an int").value_or(-1) == -1
    assert convert(int, "-11").value_or(-1) == -11
    assert convert(int, "-12").value_or(-1) == -12


@pytest.mark.parametrize("text", ["not", "1 2", " 33", "44 ", "0x11", "7 + 5"])
def test_invalid_inputs_fail(lexical_default, text):
    assert not convert(int, text)


def test_getting_started_values(lexical_default):
    cnv = LexicalCast()
    assert lexical_cast(int, "123") == 123
    assert convert(int, "123").value() == 123
    assert convert(int, "123", cnv).value() == 123
    assert lexical_cast(str, 123) == "123"
    assert convert(str, 123).value() == "123"
    assert convert(str, 123, cnv).value() == "123"


def test_fallback_on_failure():
    assert convert(int, "uhm", LexicalCast()).value_or(-1) == -1


def test_leading_whitespace_rejected():
    with pytest.raises(BadLexicalCast):
        lexical_cast(int, "   123")


def test_bad_cast_is_conversion_error():
    with pytest.raises(ConversionError):
        lexical_cast(int, "uhm")


def test_float_to_text():
    assert lexical_cast(str, 12.34567) == "12.34567"


def test_float_round_trip():
    for value in (0.5, -3.25, 12.34567):
        assert lexical_cast(float, lexical_cast(str, value)) == value


def test_bool_forms():
    assert lexical_cast(str, True) == "1"
    assert lexical_cast(str, False) == "0"
    assert lexical_cast(bool, "1") is True
    assert lexical_cast(bool, "0") is False
    with pytest.raises(BadLexicalCast):
        lexical_cast(bool, "true")


def test_float_to_int_fails():
    with pytest.raises(BadLexicalCast):
        lexical_cast(int, 1.5)


def test_user_type_round_trip():
    assert lexical_cast(Change, "up") is Change.UP
    assert lexical_cast(str, Change.DN) == "dn"
    assert convert(Change, "up", LexicalCast(), Change.NO) is Change.UP
    assert convert(Change, "sideways", LexicalCast(), Change.NO) is Change.NO