"""Integer parsing and formatting with C ``int`` semantics."""

from __future__ import annotations

_LONG_MAX = 2**63 - 1
_ULLONG_MOD = 2**64
_UINT_MOD = 2**32
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _to_int32(value: int) -> int:
    value %= _UINT_MOD
    return value - _UINT_MOD if value >= 2**31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C ``atoi`` family does.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. A magnitude reaching the 64-bit signed limit
    yields -1 for positive input and 0 for negative input. Otherwise the
    result is truncated to a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = (value * 10 + ord(text[pos]) - ord("0")) % _ULLONG_MOD
        if sign < 0 and value > _LONG_MAX:
            return 0
        if sign > 0 and value >= _LONG_MAX:
            return -1
        pos += 1
    return _to_int32(_to_int32(value) * sign)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal; wider values wrap first."""
    n = _to_int32(n)
    magnitude = str(abs(n))
    return f"-{magnitude}" if n < 0 else magnitude


def uint_len(n: int) -> int:
    """Count the decimal digits of an unsigned 32-bit integer; zero has none."""
    n %= _UINT_MOD
    return len(str(n)) if n else 0