"""Writing characters, strings and numbers to a text stream.

Every function writes to ``stream``, or to standard output when it is
None, and returns the number of characters written.
"""

from __future__ import annotations

import sys
from typing import TextIO

from minifmt.transform import itoa

_UINT_MAX = (1 << 32) - 1
_UINTPTR_MAX = sys.maxsize * 2 + 1


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _check_unsigned(x: int, limit: int, kind: str) -> None:
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"expected an int, got {type(x).__name__}")
    if not 0 <= x <= limit:
        raise OverflowError(f"{x} does not fit in {kind}")


def put_char(c: str, stream: TextIO | None = None) -> int:
    """Write a single character."""
    if not isinstance(c, str):
        raise TypeError(f"expected a one-character str, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)
    return 1


def put_str(s: str, stream: TextIO | None = None) -> int:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _target(stream).write(s)
    return len(s)


def put_endl(s: str, stream: TextIO | None = None) -> int:
    """Write a string followed by a newline."""
    return put_str(s, stream) + put_char("\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write a signed 32-bit integer in decimal."""
    return put_str(itoa(n), stream)


def put_uint(x: int, stream: TextIO | None = None) -> int:
    """Write an unsigned 32-bit integer in decimal."""
    _check_unsigned(x, _UINT_MAX, "an unsigned 32-bit integer")
    return put_str(str(x), stream)


def put_ptr(x: int, stream: TextIO | None = None) -> int:
    """Write an address-sized unsigned integer in lowercase hexadecimal, without prefix."""
    _check_unsigned(x, _UINTPTR_MAX, "an address-sized unsigned integer")
    return put_str(format(x, "x"), stream)


def put_hex(x: int, fmt: str, stream: TextIO | None = None) -> int:
    """Write an unsigned 32-bit integer in hexadecimal.

    Digits are lowercase when ``fmt`` is ``"x"`` and uppercase otherwise.
    """
    _check_unsigned(x, _UINT_MAX, "an unsigned 32-bit integer")
    return put_str(format(x, "x" if fmt == "x" else "X"), stream)