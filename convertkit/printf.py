"""Converter built on printf-style formatting and scanf-style reading."""

from __future__ import annotations

import collections
import re
from typing import Any, Optional

from convertkit.core import Result
from convertkit.parameters import Base
from convertkit.traits import is_string

_C_SPACE = " \t\n\v\f\r"

_INT_LETTERS = {Base.DEC: "d", Base.HEX: "x", Base.OCT: "o"}

_INT_PATTERNS = {
    Base.DEC: (re.compile(r"[+-]?[0-9]+"), 10),
    Base.HEX: (re.compile(r"[+-]?(?:0[xX])?[0-9a-fA-F]+"), 16),
    Base.OCT: (re.compile(r"[+-]?[0-7]+"), 8),
}

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|infinity|inf|nan)",
    re.IGNORECASE,
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


def _check_base(base: Any) -> Base:
    base = Base(base)
    if base not in _INT_LETTERS:
        raise ValueError(f"base {base.name} is not supported by this converter")
    return base


def _check_precision(precision: Any) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ValueError(f"precision must be a non-negative integer, got {precision!r}")
    return precision


class PrintfConverter:
    """Writes numbers with printf-style formats and reads them scanf-style.

    Integers are written in the configured base with the precision as the
    minimum number of digits; floats are written in fixed notation with the
    precision as the number of decimals. Reading skips leading whitespace and
    stops at the first character that cannot continue the number.
    """

    def __init__(self, base: Any = Base.DEC, precision: int = 0) -> None:
        self._base = _check_base(base)
        self._precision = _check_precision(precision)

    @property
    def base(self) -> Base:
        return self._base

    @property
    def precision(self) -> int:
        return self._precision

    def configure(self, base: Any = None, precision: Optional[int] = None) -> "PrintfConverter":
        """Change the base and/or precision; return ``self`` for chaining."""
        if base is not None:
            self._base = _check_base(base)
        if precision is not None:
            self._precision = _check_precision(precision)
        return self

    def __call__(self, value_in: Any, out_type: Any) -> Any:
        if out_type is str:
            return self._to_str(value_in)
        text = _as_text(value_in)
        if text is None:
            raise TypeError(f"cannot convert {type(value_in).__name__} to {out_type!r}")
        return self._str_to(text, out_type)

    def _to_str(self, value: Any) -> str:
        if isinstance(value, bool):
            raise TypeError("bool values are not managed by this converter")
        if isinstance(value, int):
            return f"%.*{_INT_LETTERS[self._base]}" % (self._precision, value)
        if isinstance(value, float):
            return "%.*f" % (self._precision, value)
        raise TypeError(f"{type(value).__name__} values are not managed by this converter")

    def _str_to(self, text: str, out_type: Any) -> Any:
        text = text.lstrip(_C_SPACE)
        if out_type is int:
            pattern, radix = _INT_PATTERNS[self._base]
            match = pattern.match(text)
            return int(match.group(), radix) if match else Result()
        if out_type is float:
            match = _FLOAT_PATTERN.match(text)
            if not match:
                return Result()
            number = match.group()
            if "x" in number.lower() and not number.lower().lstrip("+-").startswith("inf"):
                return float.fromhex(number)
            return float(number)
        raise TypeError(f"{out_type!r} is not managed by this converter")