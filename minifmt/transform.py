"""Building new strings from existing ones: conversion, slicing, joining,
trimming, splitting and per-character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _check_separator(sep: str) -> None:
    if not isinstance(sep, str):
        raise TypeError(f"expected a one-character str, got {type(sep).__name__}")
    if len(sep) != 1:
        raise ValueError(f"expected a single character, got {sep!r}")


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer.

    Raises OverflowError for values outside the 32-bit range.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or beyond the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return f"{s1}{s2}"


def strtrim(s: str, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``.

    An empty or missing ``charset`` leaves ``s`` unchanged.
    """
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _check_separator(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character of ``s``."""
    if f is None:
        raise TypeError("a mapping function is required")
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call ``f(index, char)`` for each character of ``chars``, in order.

    When ``f`` returns a character it replaces the one at that index;
    returning None leaves the character as it is.
    """
    if f is None:
        raise TypeError("a callback function is required")
    for index in range(len(chars)):
        replacement = f(index, chars[index])
        if replacement is not None:
            chars[index] = replacement