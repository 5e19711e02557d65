"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

_INT_MAX = 2**31 - 1
_UINT_MOD = 2**32
_ULONG_MOD = 2**64
_MISSING = object()


class FormatError(ValueError):
    """Raised when a format string or its arguments cannot be formatted."""


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError as exc:
        raise FormatError(f"%{spec} expects an integer, got {type(value).__name__}") from exc


def _to_int32(value: int) -> int:
    return (value + 2**31) % _UINT_MOD - 2**31


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address %= _ULONG_MOD
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        raise FormatError(f"unknown conversion %{spec}")
    value = next(args, _MISSING)
    if value is _MISSING:
        raise FormatError(f"missing argument for %{spec}")
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _format_pointer(value)
    number = _as_int(value, spec)
    if spec in "di":
        return str(_to_int32(number))
    if spec == "u":
        return str(number % _UINT_MOD)
    return format(number % _UINT_MOD, spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    A lone ``%`` at the very end of the format produces nothing.
    """
    if fmt is None:
        raise FormatError("format string is None")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    text = "".join(pieces)
    if len(text) > _INT_MAX:
        raise FormatError("formatted output is too long")
    return text


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default) and return its length."""
    text = format_printf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)