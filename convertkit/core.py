"""Conversion results, the convert entry point and converter adapters.

A converter is any callable taking ``(value_in, out_type)``. It returns the
converted value, or a :class:`Result`, and signals failure either by
returning an empty :class:`Result` or by raising :class:`ConversionError`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")

Converter = Callable[[Any, Any], Any]


class ConversionError(ValueError):
    """Raised when a conversion failed and no fallback was available."""


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


class _ThrowOnFailure:
    def __repr__(self) -> str:
        return "THROW_ON_FAILURE"


THROW_ON_FAILURE = _ThrowOnFailure()
"""Fallback marker asking :func:`convert` to raise on failure."""


class Result(Generic[T]):
    """Outcome of a conversion: either a value or nothing."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = _MISSING) -> None:
        self._value = value

    def __bool__(self) -> bool:
        return self._value is not _MISSING

    def value(self) -> T:
        """Return the converted value or raise :class:`ConversionError`."""
        if not self:
            raise ConversionError("conversion failed")
        return self._value

    def value_or(self, fallback: T) -> T:
        """Return the converted value, or ``fallback`` when the conversion failed."""
        return self._value if self else fallback

    def value_or_eval(self, func: Callable[[], T]) -> T:
        """Return the converted value, or call ``func`` only when the conversion failed."""
        return self._value if self else func()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._value == other._value if (self and other) else (not self and not other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Result({self._value!r})" if self else "Result()"


_settings: Dict[str, Optional[Converter]] = {"converter": None}


def set_default_converter(converter: Optional[Converter]) -> Optional[Converter]:
    """Install the converter used when none is given; return the previous one.

    ``None`` removes the default converter. Anything else must be callable.
    """
    if converter is not None and not callable(converter):
        raise TypeError(f"a converter must be callable, got {converter!r}")
    previous = _settings["converter"]
    _settings["converter"] = converter
    return previous


def default_converter() -> Converter:
    """Return the installed default converter."""
    converter = _settings["converter"]
    if converter is None:
        raise LookupError("no default converter has been set")
    return converter


def _run(converter: Converter, value_in: Any, out_type: Any) -> Result:
    try:
        produced = converter(value_in, out_type)
    except ConversionError:
        return Result()
    return produced if isinstance(produced, Result) else Result(produced)


def convert(out_type: Any, value_in: Any, converter: Optional[Converter] = None,
            fallback: Any = _MISSING) -> Any:
    """Convert ``value_in`` to ``out_type``.

    Without a fallback a :class:`Result` is returned. With
    :data:`THROW_ON_FAILURE` the value is returned or :class:`ConversionError`
    raised. A fallback of the output type is returned on failure; any other
    callable fallback is called on failure and its result returned.
    """
    if converter is None:
        converter = default_converter()
    result = _run(converter, value_in, out_type)
    if fallback is _MISSING:
        return result
    if fallback is THROW_ON_FAILURE:
        return result.value()
    if isinstance(out_type, type) and isinstance(fallback, out_type):
        return result.value_or(fallback)
    if callable(fallback):
        return result.value_or_eval(fallback)
    return result.value_or(fallback)


class Reference:
    """A reusable one-argument conversion function, handy with ``map``."""

    def __init__(self, converter: Converter, out_type: Any, in_type: Any = None) -> None:
        self._converter = converter
        self._out_type = out_type
        self._in_type = in_type
        self._fallback: Result = Result()

    def value_or(self, fallback: Any) -> "Reference":
        """Set the value returned when a conversion fails; return ``self``."""
        self._fallback = Result(fallback)
        return self

    def __call__(self, value_in: Any) -> Any:
        if self._in_type is not None and not isinstance(value_in, self._in_type):
            value_in = self._in_type(value_in)
        result = convert(self._out_type, value_in, self._converter)
        return result.value() if result else self._fallback.value()


def apply(out_type: Any, converter: Converter, in_type: Any = None) -> Reference:
    """Build a :class:`Reference` converting to ``out_type`` with ``converter``."""
    return Reference(converter, out_type, in_type)