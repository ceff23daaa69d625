# convertkit

convertkit gives you one calling convention for turning values into other
types, whatever engine does the work. A failed conversion does not raise.
It returns an empty `Result`, and you decide what the failure means.

## Installation

```
pip install convertkit
```

To run the test suite:

```
pip install "convertkit[test]"
pytest
```

## Converting values

`convertkit.core.convert(out_type, value_in, converter=None, fallback=...)`
takes the type you want, the value and a converter. It returns a `Result`:

```python
from convertkit.core import convert, ConversionError
from convertkit.lexical import LexicalCast

cnv = LexicalCast()

convert(int, "123", cnv).value()         # 123
convert(str, 123, cnv).value()           # "123"
convert(int, "uhm", cnv).value_or(-1)    # -1, no exception
convert(int, "uhm", cnv).value()         # raises ConversionError
```

A `Result` is true when the conversion succeeded. `value_or_eval` calls
its function only when the conversion failed:

```python
result = convert(int, "not an int", cnv)
number = result.value_or_eval(lambda: 0)
```

When you pass a `fallback`, `convert` returns a plain value and not a
`Result`:

* `THROW_ON_FAILURE` (from `convertkit.core`) returns the value, or raises
  `ConversionError` if the conversion failed.
* A fallback that is an instance of `out_type` is returned on failure.
* Any other callable fallback is called on failure, and its result is
  returned.
* Any other fallback value is returned on failure.

A converter is any callable `converter(value_in, out_type)`. It can return
the converted value or a `Result`. It signals failure either by returning
an empty `Result` or by raising `ConversionError`, and `convert` turns that
exception into an empty `Result`. Other exceptions propagate, for example
the `TypeError` a converter raises for a type it does not handle.

### The default converter

`set_default_converter(converter)` installs the converter that `convert`
uses when you leave one out, and returns the converter it replaces.
Passing `None` removes the default. `default_converter()` returns the
installed converter, or raises `LookupError` if there is none.

```python
from convertkit.core import convert, set_default_converter
from convertkit.lexical import LexicalCast

set_default_converter(LexicalCast())
convert(int, "123").value()              # 123
```

### Plain casts

`convertkit.lexical.lexical_cast(out_type, value_in)` is the strict form
that raises on failure. It rejects surrounding whitespace, trailing
characters and base prefixes. It raises `BadLexicalCast`, a subclass of
`ConversionError`:

```python
from convertkit.lexical import lexical_cast, BadLexicalCast

lexical_cast(int, "123")       # 123
lexical_cast(str, 12.34567)    # "12.34567"
lexical_cast(int, " 33")       # raises BadLexicalCast
lexical_cast(int, "0x11")      # raises BadLexicalCast
```

## Converters

* `LexicalCast` (`convertkit.lexical`) converts strictly through the
  textual form of the value, as `lexical_cast` does.
* `StrtolConverter(base=Base.DEC, precision=0)` (`convertkit.strtol`)
  handles the following:
  * It reads integers in bases 2, 8, 10 and 16 within the 32-bit signed
    range. A leading sign is allowed, and so is a `0x` prefix in base 16.
    Any other character, or overflow, fails.
  * It reads finite floats. Leading whitespace is skipped.
  * It writes integers in the configured base, with upper-case digits.
  * It writes floats in fixed notation with `precision` decimals, rounding
    halves away from zero.
* `PrintfConverter(base=Base.DEC, precision=0)` (`convertkit.printf`)
  formats and parses in the style of printf and scanf:
  * It writes integers in decimal, hex or octal, with `precision` as the
    minimum number of digits.
  * It writes floats in fixed notation with `precision` decimals.
  * It reads numbers after leading whitespace and stops at the first
    character that cannot continue the number.
  * `Base.BIN` is rejected with `ValueError`.

Both configurable converters have a `configure(base=None, precision=None)`
method that returns the converter, so you can use it inline. They also have
read-only `base` and `precision` properties:

```python
from convertkit.core import convert
from convertkit.parameters import Base
from convertkit.printf import PrintfConverter

cnv = PrintfConverter()
convert(str, 255, cnv.configure(base=Base.HEX)).value()        # "ff"
convert(str, 12.3456, cnv.configure(precision=3)).value()      # "12.346"
convert(int, "-12", PrintfConverter()).value_or(-1)            # -12
```

`convertkit.parameters` defines the enums `Base`, `Notation` and `Adjust`.
Only `Base` is used by the converters in this package.

## Converting sequences

`apply(out_type, converter, in_type=None)` builds a reusable `Reference`.
A `Reference` is a one-argument callable, so you can pass it to `map`. Set
its fallback with `value_or`. Without a fallback, a failed conversion
raises `ConversionError`. If you give `in_type`, each input is first
converted to that type.

```python
from convertkit.core import apply
from convertkit.strtol import StrtolConverter

to_int = apply(int, StrtolConverter()).value_or(-1)
list(map(to_int, ["5", "12", "not an int"]))    # [5, 12, -1]
```

## Helpers

`convertkit.traits` provides a few small checks:

* `is_char(value)` is true for a single character.
* `is_string(value)` is true for `str`, `bytes`, `bytearray` and `UserString`,
  and for a non-empty sequence made only of characters.
* `is_space(ch)` and `to_upper(ch)` take a single character. They raise
  `TypeError` for anything else.
* `has_member(obj, name)` tells whether a class or instance declares
  `name`. Annotated attributes count.
* `can_call(obj, name, *args)` tells whether that member accepts `args`
  positionally.

## Demo

The package includes a self-checking tour of the examples above:

```
convertkit-demo
convertkit-demo --verbose
```

It runs each example and prints every failing check. With `-v` or
`--verbose` it prints the passing checks as well. It then prints a summary
line, and its exit status is the number of failures.

## What it does not do

* There is no stream-style converter, so you cannot set field width, fill
  character or alignment.
* There is no scientific notation, shown base prefix, upper-case hex
  switch, `true`/`false` spelling of booleans or locale-dependent number
  formatting.
* `Adjust` and `Notation` are defined, but no converter acts on them.