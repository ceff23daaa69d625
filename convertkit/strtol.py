"""Fast hand-written converter between numbers and text."""

from __future__ import annotations

import collections
import math
import re
import sys
from typing import Any, Optional

from convertkit.core import Result
from convertkit.parameters import Base
from convertkit.traits import is_string

_C_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DECIMAL = "0123456789"
_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_TENS = (1, 10, 100, 1000, 10000, 100000, 1000000, 10000000)

_INT_MAX = 2**31 - 1
_FLOAT_MAX = sys.float_info.max
_MAX_FLOAT_TEXT = 127

_DEC_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)


def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if isinstance(value, collections.UserString):
        return str(value)
    if is_string(value):
        return "".join(value)
    return None


def _check_precision(precision: Any) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ValueError(f"precision must be a non-negative integer, got {precision!r}")
    return precision


def _round_half_away(x: float) -> float:
    if -0.5 < x < 0.5:
        return 0.0
    if x > 0:
        r = math.ceil(x)
        if r - x > 0.5:
            r -= 1
    else:
        r = math.floor(x)
        if x - r > 0.5:
            r += 1
    return float(r)


def _adjust_fraction(fraction: float, precision: int) -> float:
    """Bring ``precision`` fraction digits before the point and round."""
    for _ in range(precision // 8):
        fraction *= 100000000
    fraction *= _TENS[precision % 8]
    if not math.isfinite(fraction):
        return fraction
    return _round_half_away(fraction)


def _digit_of(value: float) -> str:
    return _DIGITS[int(value - math.floor(value / 10) * 10)]


class StrtolConverter:
    """Converts integers in bases 2, 8, 10 and 16 and floats in fixed notation.

    Integers are read as C ``int`` values: a leading sign, an optional ``0x``
    prefix in base 16, then digits only; overflow and any stray character
    fail. Floats are read whole after optional leading whitespace and must be
    finite. Floats are written with ``precision`` decimals, rounding halves
    away from zero.
    """

    def __init__(self, base: Any = Base.DEC, precision: int = 0) -> None:
        self._base = Base(base)
        self._precision = _check_precision(precision)

    @property
    def base(self) -> Base:
        return self._base

    @property
    def precision(self) -> int:
        return self._precision

    def configure(self, base: Any = None, precision: Optional[int] = None) -> "StrtolConverter":
        """Change the base and/or precision; return ``self`` for chaining."""
        if base is not None:
            self._base = Base(base)
        if precision is not None:
            self._precision = _check_precision(precision)
        return self

    def __call__(self, value_in: Any, out_type: Any) -> Any:
        if out_type is str:
            return self._to_str(value_in)
        text = _as_text(value_in)
        if text is None:
            raise TypeError(f"cannot convert {type(value_in).__name__} to {out_type!r}")
        if out_type is int:
            return self._str_to_int(text)
        if out_type is float:
            return self._str_to_float(text)
        raise TypeError(f"{out_type!r} is not managed by this converter")

    def _to_str(self, value: Any) -> Any:
        if isinstance(value, bool):
            raise TypeError("bool values are not managed by this converter")
        if isinstance(value, int):
            return self._int_to_str(value)
        if isinstance(value, float):
            return self._float_to_str(value)
        raise TypeError(f"{type(value).__name__} values are not managed by this converter")

    def _int_to_str(self, value: int) -> str:
        base = int(self._base)
        negative = value < 0
        magnitude = -value if negative else value
        digits = []
        while magnitude:
            magnitude, digit = divmod(magnitude, base)
            digits.append(_DIGITS[digit])
        text = "".join(reversed(digits)) or "0"
        return "-" + text if negative else text

    def _float_to_str(self, value: float) -> Any:
        if not math.isfinite(value):
            return Result()
        negative = value < 0
        if negative:
            value = -value
        precision = self._precision
        ipart = float(math.floor(value))
        fpart = _adjust_fraction(value - ipart, precision)
        if not math.isfinite(fpart):
            return Result()

        int_digits = []
        while ipart >= 1:
            int_digits.append(_digit_of(ipart))
            ipart /= 10
        int_text = "".join(reversed(int_digits)) or "0"

        frac_digits = []
        for _ in range(precision):
            frac_digits.append(_digit_of(fpart))
            fpart /= 10
        frac_text = "".join(reversed(frac_digits))

        if fpart >= 1:
            int_text = str(int(int_text) + 1)

        text = int_text + ("." + frac_text if precision else "")
        return "-" + text if negative else text

    def _str_to_int(self, text: str) -> Any:
        base = int(self._base)
        negative = False
        if text and text[0] in "+-":
            negative = text[0] == "-"
            text = text[1:]
        if base == 16 and text[:1] == "0":
            text = text[1:]
            if text[:1] in ("x", "X") and text:
                text = text[1:]

        limit = _INT_MAX + (1 if negative else 0)
        cutoff, cutlim = divmod(limit, base)
        result = 0
        for ch in text:
            if ch in _DECIMAL:
                digit = ord(ch) - ord("0")
            elif ch in _LETTERS:
                digit = ord(ch.lower()) - ord("a") + 10
            else:
                return Result()
            if digit >= base or result > cutoff or (result == cutoff and digit > cutlim):
                return Result()
            result = result * base + digit
        return -result if negative else result

    def _str_to_float(self, text: str) -> Any:
        text = text.partition("\0")[0][:_MAX_FLOAT_TEXT]
        if not text:
            return 0.0
        number = text.lstrip(_C_SPACE)
        try:
            if _HEX_FLOAT.fullmatch(number):
                result = float.fromhex(number)
            elif _DEC_FLOAT.fullmatch(number):
                result = float(number)
            else:
                return Result()
        except OverflowError:
            return Result()
        if not math.isfinite(result) or not -_FLOAT_MAX <= result <= _FLOAT_MAX:
            return Result()
        return result