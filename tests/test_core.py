import functools

import pytest

from convertkit.core import (
    THROW_ON_FAILURE,
    ConversionError,
    Reference,
    Result,
    apply,
    convert,
    default_converter,
    set_default_converter,
)
from convertkit.lexical import LexicalCast, lexical_cast


def plain_old_func(value_in, out_type):
    try:
        return Result(lexical_cast(int, value_in))
    except ConversionError:
        return Result()


class Converter1:
    def __call__(self, value_in, out_type):
        return Result()


@pytest.fixture
def lexical_default():
    previous = set_default_converter(LexicalCast())
    yield
    set_default_converter(previous)


@pytest.fixture
def no_default():
    previous = set_default_converter(None)
    yield
    set_default_converter(previous)


def test_plain_function_converter():
    assert convert(int, "-12", plain_old_func).value_or(-1) == -12


def test_partial_based_converter():
    cnv = functools.partial(lambda value_in, out_type: lexical_cast(out_type, value_in))
    assert convert(int, "-12", cnv).value_or(-1) == -12


def test_lambda_converter_raising_failure():
    cnv = lambda value_in, out_type: lexical_cast(out_type, value_in)  # noqa: E731
    assert convert(int, "uhm", cnv).value_or(-1) == -1


def test_converter_leaving_result_empty():
    assert not convert(int, "-12", Converter1())
    assert not convert(str, 11, Converter1())


def test_result_value_raises_when_empty():
    with pytest.raises(ConversionError):
        Result().value()


def test_result_accessors():
    assert Result(5).value() == 5
    assert Result(5).value_or(-1) == 5
    assert Result().value_or(-1) == -1
    assert Result().value_or_eval(lambda: 7) == 7


def test_value_or_eval_only_called_on_failure():
    calls = []

    def fallback():
        calls.append(1)
        return 11

    assert convert(int, "123", LexicalCast()).value_or_eval(fallback) == 123
    assert calls == []
    assert convert(int, "bad", LexicalCast()).value_or_eval(fallback) == 11
    assert calls == [1]


def test_result_equality():
    assert Result(3) == Result(3)
    assert Result() == Result()
    assert Result(3) != Result()


def test_fallback_value():
    assert convert(int, "uhm", LexicalCast(), -1) == -1
    assert convert(int, "42", LexicalCast(), -1) == 42


def test_fallback_callable():
    assert convert(int, "uhm", LexicalCast(), lambda: 99) == 99


def test_throw_on_failure():
    assert convert(int, "123", LexicalCast(), THROW_ON_FAILURE) == 123
    with pytest.raises(ConversionError):
        convert(int, "uhm", LexicalCast(), THROW_ON_FAILURE)


def test_default_converter_used(lexical_default):
    assert convert(int, "123").value() == 123
    assert convert(str, 123).value() == "123"
    assert isinstance(default_converter(), LexicalCast)


def test_missing_default_converter(no_default):
    with pytest.raises(LookupError):
        convert(int, "123")
    with pytest.raises(LookupError):
        default_converter()


def test_set_default_returns_previous(no_default):
    cnv = LexicalCast()
    assert set_default_converter(cnv) is None
    assert set_default_converter(None) is cnv


def test_apply_with_map():
    ref = apply(int, LexicalCast()).value_or(-1)
    assert list(map(ref, ["5", "0XF", "not an int"])) == [5, -1, -1]


def test_reference_without_fallback_raises():
    ref = Reference(LexicalCast(), int)
    assert ref("17") == 17
    with pytest.raises(ConversionError):
        ref("seventeen")


def test_apply_with_input_type_coerces():
    ref = apply(str, LexicalCast(), int)
    assert ref(5.7) == "5"