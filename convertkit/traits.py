"""Introspection helpers: character and string checks, member and call checks."""

from __future__ import annotations

import collections
import types
from collections.abc import Sequence
from typing import Any

_CO_VARARGS = 0x04


def is_char(value: Any) -> bool:
    """Return True for a single character."""
    return isinstance(value, str) and len(value) == 1


def is_string(value: Any) -> bool:
    """Return True for text or a non-empty sequence made only of characters."""
    if isinstance(value, (str, bytes, bytearray, collections.UserString)):
        return True
    if isinstance(value, Sequence):
        return len(value) > 0 and all(is_char(item) for item in value)
    return False


def _require_char(ch: Any) -> str:
    if not is_char(ch):
        raise TypeError(f"expected a single character, got {ch!r}")
    return ch


def is_space(ch: str) -> bool:
    """Return True when ``ch`` is a whitespace character."""
    return _require_char(ch).isspace()


def to_upper(ch: str) -> str:
    """Return the upper-case form of ``ch``; characters without a one-character form are kept."""
    upper = _require_char(ch).upper()
    return upper if len(upper) == 1 else ch


def has_member(obj: Any, name: str) -> bool:
    """Return True when the class of ``obj`` (or ``obj`` itself) declares ``name``."""
    if not isinstance(obj, type) and name in getattr(obj, "__dict__", {}):
        return True
    cls = obj if isinstance(obj, type) else type(obj)
    for klass in cls.__mro__:
        namespace = vars(klass)
        if name in namespace or name in namespace.get("__annotations__", {}):
            return True
    return False


def _static_lookup(cls: type, name: str) -> Any:
    for klass in cls.__mro__:
        namespace = vars(klass)
        if name in namespace:
            return namespace[name]
    raise AttributeError(name)


def _accepts(target: Any, nargs: int) -> bool:
    """Return True when ``target`` can be called with ``nargs`` positional arguments."""
    func = target
    if isinstance(func, (staticmethod, classmethod)):
        func = func.__func__
    if isinstance(func, types.MethodType):
        nargs += 1
        func = func.__func__
    code = getattr(func, "__code__", None)
    if code is None and not isinstance(func, types.FunctionType):
        call = getattr(type(func), "__call__", None)
        if isinstance(call, types.FunctionType):
            nargs += 1
            func = call
            code = call.__code__
    if code is None:
        return True
    defaults = getattr(func, "__defaults__", None) or ()
    kwdefaults = getattr(func, "__kwdefaults__", None) or {}
    positional = code.co_argcount
    kwonly_names = code.co_varnames[positional:positional + code.co_kwonlyargcount]
    if any(kw not in kwdefaults for kw in kwonly_names):
        return False
    if nargs < positional - len(defaults):
        return False
    return bool(code.co_flags & _CO_VARARGS) or nargs <= positional


def can_call(obj: Any, name: str, *args: Any) -> bool:
    """Return True when member ``name`` of ``obj`` accepts ``args``.

    ``obj`` may be a class or an instance; for a class, ordinary methods are
    checked as if called on an instance.
    """
    if not has_member(obj, name):
        return False
    nargs = len(args)
    if isinstance(obj, type):
        try:
            raw = _static_lookup(obj, name)
        except AttributeError:
            return False
        if isinstance(raw, staticmethod):
            target = raw.__func__
        elif isinstance(raw, types.FunctionType) or (
            callable(raw) and hasattr(raw, "__get__") and not isinstance(raw, (type, classmethod))
        ):
            target = raw
            nargs += 1
        else:
            target = getattr(obj, name, None)
    else:
        target = getattr(obj, name, None)
    if not callable(target):
        return False
    return _accepts(target, nargs)