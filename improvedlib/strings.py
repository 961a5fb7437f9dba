"""String helpers with the semantics of the classic C string routines.

Positions are returned as indexes into the string rather than pointers,
and ``None`` stands for "not found".
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, TypeVar, Union

T = TypeVar("T")


def _separator(sep: str) -> str:
    if not isinstance(sep, str):
        raise TypeError(f"separator must be a string, not {type(sep).__name__}")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {len(sep)}")
    return sep


def _target(c: Union[str, int]) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def count_words(s: str, sep: str) -> int:
    """Count the maximal runs of characters in ``s`` that are not ``sep``."""
    return len(split(s, sep))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between repeated separators."""
    return [word for word in s.split(_separator(sep)) if word]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; a missing string counts as empty."""
    return (s1 or "") + (s2 or "")


def strchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the terminator (``"\\0"`` or 0) yields ``len(s)``.
    """
    target = _target(c)
    if target == "\0":
        return len(s)
    index = s.find(target)
    return index if index >= 0 else None


def strrchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the terminator (``"\\0"`` or 0) yields ``len(s)``.
    """
    target = _target(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return index if index >= 0 else None


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` on each item of ``s`` in place.

    When ``f`` returns something other than ``None`` the item is replaced.
    """
    for index, item in enumerate(s):
        result = f(index, item)
        if result is not None:
            s[index] = result


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    A string that ends early compares as if followed by a zero code.
    """
    _non_negative("n", n)
    for index in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b:
            return a - b
    return 0


def strndup(s: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``s``."""
    return s[: _non_negative("n", n)]


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0.
    """
    _non_negative("length", length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return index if index >= 0 else None


def strtrim(s: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]