"""Formatting parameters shared by the configurable converters."""

from __future__ import annotations

import enum


class Adjust(enum.Enum):
    """Alignment of a formatted value inside its field."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Base(enum.IntEnum):
    """Numeric base used when reading or writing integers."""

    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16


class Notation(enum.Enum):
    """Notation used when writing floating-point values."""

    FIXED = "fixed"
    SCIENTIFIC = "scientific"