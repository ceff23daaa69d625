"""Strict text-based conversions and a converter built on them."""

from __future__ import annotations

import re
from typing import Any

from convertkit.core import ConversionError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class BadLexicalCast(ConversionError):
    """Raised when text cannot be read as the requested type."""


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def lexical_cast(out_type: Any, value_in: Any) -> Any:
    """Convert through the textual form of ``value_in``, accepting only exact text.

    Surrounding whitespace, trailing characters and base prefixes are rejected.
    """
    if out_type is str:
        return _to_text(value_in)
    text = _to_text(value_in)
    if out_type is bool:
        if text not in ("0", "1"):
            raise BadLexicalCast(f"cannot read {text!r} as bool")
        return text == "1"
    if out_type is int:
        if not _INT_RE.fullmatch(text):
            raise BadLexicalCast(f"cannot read {text!r} as int")
        return int(text)
    if out_type is float:
        if not _FLOAT_RE.fullmatch(text):
            raise BadLexicalCast(f"cannot read {text!r} as float")
        return float(text)
    try:
        return out_type(text)
    except (ValueError, TypeError) as exc:
        raise BadLexicalCast(f"cannot read {text!r} as {out_type!r}") from exc


class LexicalCast:
    """Converter that delegates to :func:`lexical_cast`."""

    def __call__(self, value_in: Any, out_type: Any) -> Any:
        return lexical_cast(out_type, value_in)