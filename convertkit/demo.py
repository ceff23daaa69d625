"""Walk-through of the conversion interfaces, run as a self-checking program."""

from __future__ import annotations

import argparse
import contextlib
import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Sequence

from convertkit.core import ConversionError, convert, set_default_converter
from convertkit.lexical import BadLexicalCast, LexicalCast, lexical_cast
from convertkit.parameters import Base
from convertkit.printf import PrintfConverter
from convertkit.strtol import StrtolConverter

logger = logging.getLogger(__name__)


def _log(msg: str) -> None:
    logger.warning(msg)


def fallback_fun(msg: str, fallback_value: Any) -> Any:
    """Log ``msg`` and return ``fallback_value``.

    Used as a lazily evaluated fallback: it only runs when a conversion fails.
    """
    _log(msg)
    return fallback_value


@dataclass(frozen=True)
class _Check:
    name: str
    actual: Any
    expected: Any

    @property
    def passed(self) -> bool:
        return self.actual == self.expected


@contextlib.contextmanager
def _default_converter(converter: Callable[[Any, Any], Any]) -> Iterator[None]:
    previous = set_default_converter(converter)
    try:
        yield
    finally:
        set_default_converter(previous)


def _example1() -> List[_Check]:
    cnv = LexicalCast()
    try:
        return [
            _Check("example1 lexical_cast int", lexical_cast(int, "123"), 123),
            _Check("example1 default int", convert(int, "123").value(), 123),
            _Check("example1 explicit int", convert(int, "123", cnv).value(), 123),
            _Check("example1 lexical_cast str", lexical_cast(str, 123), "123"),
            _Check("example1 default str", convert(str, 123).value(), "123"),
            _Check("example1 explicit str", convert(str, 123, cnv).value(), "123"),
        ]
    except ConversionError as exc:
        return [_Check("example1 raised", str(exc), None)]


def _example2() -> List[_Check]:
    i = convert(int, "uhm", LexicalCast()).value_or(-1)
    return [_Check("example2 fallback", i, -1)]


def _example3() -> List[_Check]:
    converters = (LexicalCast(), StrtolConverter(), PrintfConverter())
    return [
        _Check(f"example3 {type(cnv).__name__}", convert(int, "123", cnv).value(), 123)
        for cnv in converters
    ]


def _example4() -> List[_Check]:
    try:
        lexical_cast(int, "   123")
        leading_space_rejected = False
    except BadLexicalCast:
        leading_space_rejected = True

    fixed3 = StrtolConverter(precision=3)
    printf3 = PrintfConverter(precision=3)
    return [
        _Check("example4 lexical_cast rejects spaces", leading_space_rejected, True),
        _Check("example4 printf skips spaces",
               convert(int, "   123", PrintfConverter()).value(), 123),
        _Check("example4 lexical_cast str", lexical_cast(str, 12.34567), "12.34567"),
        _Check("example4 strtol fixed", convert(str, 12.34567, fixed3).value(), "12.346"),
        _Check("example4 printf fixed", convert(str, 12.34567, printf3).value(), "12.346"),
    ]


def _example5() -> List[_Check]:
    cnv = StrtolConverter()
    return [
        _Check("example5 lexical_cast", lexical_cast(int, "123"), 123),
        _Check("example5 value", convert(int, "123", cnv).value(), 123),
        _Check("example5 value_or", convert(int, "uhm", cnv).value_or(-1), -1),
    ]


def _example6() -> List[_Check]:
    s1, s2 = "123", "456"
    default_i1, default_i2 = 11, 12
    cnv = StrtolConverter()

    i1 = convert(int, s1, cnv.configure(base=Base.HEX)).value_or(-1)
    i2 = convert(int, s2, cnv.configure(base=Base.DEC)).value_or(-1)
    if i1 == -1:
        _log("bad i1")
        i1 = default_i1
    if i2 == -1:
        _log("bad i2")
        i2 = default_i2
    return [_Check("example6 hex", i1, 291), _Check("example6 dec", i2, 456)]


def _example7() -> List[_Check]:
    s1, s2 = "123", "456"
    default_i1, default_i2 = 11, 12
    cnv = StrtolConverter()

    i1 = convert(int, s1, cnv.configure(base=Base.HEX)).value_or(default_i1)
    i2 = convert(int, s2, cnv.configure(base=Base.DEC)).value_or(default_i2)
    return [_Check("example7 hex", i1, 291), _Check("example7 dec", i2, 456)]


def _example8() -> List[_Check]:
    text = "123"
    i1 = 12
    try:
        i1 = lexical_cast(int, text)
    except BadLexicalCast:
        _log("bad i1")
    return [_Check("example8 try", i1, 123)]


def _example9() -> List[_Check]:
    s1, s2 = "123", "456"
    default_i1, default_i2 = 11, 12
    i1 = convert(int, s1).value_or_eval(functools.partial(fallback_fun, "bad i1", default_i1))
    i2 = convert(int, s2).value_or_eval(functools.partial(fallback_fun, "bad i2", default_i2))
    return [_Check("example9 first", i1, 123), _Check("example9 second", i2, 456)]


def _lexical_cast_example() -> List[_Check]:
    return [
        _Check("lexical_cast int", lexical_cast(int, "123"), 123),
        _Check("convert int", convert(int, "123").value(), 123),
        _Check("convert int fallback", convert(int, "uhm").value_or(-1), -1),
        _Check("lexical_cast str", lexical_cast(str, 123), "123"),
        _Check("convert str", convert(str, 123).value(), "123"),
    ]


_EXAMPLES = (
    _example1,
    _example2,
    _example3,
    _example4,
    _example5,
    _example6,
    _example7,
    _example8,
    _example9,
    _lexical_cast_example,
)


def _run_checks() -> List[_Check]:
    checks: List[_Check] = []
    with _default_converter(LexicalCast()):
        for example in _EXAMPLES:
            checks.extend(example())
    return checks


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run every example, report failures and return the number of them."""
    parser = argparse.ArgumentParser(
        prog="convertkit-demo",
        description="Run the conversion examples and check their results.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="list every check, not only the failing ones")
    args = parser.parse_args(argv)

    failures = 0
    for check in _run_checks():
        if check.passed:
            if args.verbose:
                print(f"PASS {check.name}: {check.actual!r}")
        else:
            failures += 1
            print(f"FAIL {check.name}: expected {check.expected!r}, got {check.actual!r}")

    if failures:
        print(f"{failures} error{'s' if failures != 1 else ''} detected.")
    else:
        print("No errors detected.")
    return failures


if __name__ == "__main__":
    raise SystemExit(main())