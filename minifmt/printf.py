"""Formatted output driven by a small set of conversion specifiers.

Supported conversions: ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%p``,
``%x``, ``%X`` and ``%%``. Integers are reduced to the width the
conversion reads (32 bits, or the address width for ``%p``), so values out
of range wrap. An unknown specifier consumes no argument, writes nothing
and still counts as one character.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from minifmt.output import put_str
from minifmt.transform import itoa

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_UINTPTR_MASK = sys.maxsize * 2 + 1

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _convert_str(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _convert_int(value: Any) -> str:
    return itoa(_to_int32(_require_int(value, "d")))


def _convert_uint(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT_MASK)


def _convert_ptr(value: Any) -> str:
    if value is None:
        return NULL_POINTER
    address = _require_int(value, "p") & _UINTPTR_MASK
    if address == 0:
        return NULL_POINTER
    return f"0x{address:x}"


def _convert_hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") & _UINT_MASK, "x")


def _convert_hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & _UINT_MASK, "X")


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "s": _convert_str,
    "c": _convert_char,
    "d": _convert_int,
    "i": _convert_int,
    "u": _convert_uint,
    "p": _convert_ptr,
    "x": _convert_hex_lower,
    "X": _convert_hex_upper,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[tuple[str, int]]:
    """Yield each piece of output with the count it contributes."""
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch, 1
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec == "%":
            yield "%", 1
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            yield "", 1
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        text = converter(value)
        yield text, len(text)


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    return "".join(text for text, _ in _pieces(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write ``fmt`` with its conversions filled in from ``args``.

    Output goes to ``file``, or to standard output when it is None.
    Returns the number of characters counted.
    """
    total = 0
    for text, count in _pieces(fmt, args):
        if text:
            put_str(text, file)
        total += count
    return total