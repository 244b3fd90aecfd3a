"""String searching, comparison, bounded copying and integer parsing.

Strings carry no terminator: the end of a string plays the part of the
terminating NUL where comparison or searching needs one.
"""

from __future__ import annotations

from itertools import takewhile, zip_longest

from minifmt.chars import is_digit

_WHITESPACE = " \t\n\f\r\v"
_INT_BITS = 32


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")


def _as_char(c: int | str) -> str:
    """Turn ``c`` into a one-character string; integers are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _as_char(c)
    if target == "\0":
        index = s.find(target)
        return len(s) if index < 0 else index
    index = s.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _as_char(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal pair of code points, with
    the end of a string counting as 0, or 0 when no difference is found.
    """
    _check_size(n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            return 0
    return 0


def strnstr(big: str, little: str, n: int) -> int | None:
    """Return the index of ``little`` within the first ``n`` characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    _check_size(n)
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``; a result length below that means truncation.
    """
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer it is returned unchanged and the
    length reported is ``size + len(src)``.
    """
    _check_size(size)
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def atoi(s: str) -> int:
    """Parse the leading integer of ``s``.

    Leading whitespace and a single ``+`` or ``-`` are accepted; parsing
    stops at the first non-digit. Text without digits gives 0. The result
    wraps like a signed 32-bit integer.
    """
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    value = int(digits) if digits else 0
    return _wrap_int(value * sign)