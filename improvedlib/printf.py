"""A small printf with the conversions ``%c %s %p %d %i %u %x %X %%``.

Integers follow C ``int``/``unsigned int`` semantics: ``%d`` and ``%i``
wrap to 32-bit signed, ``%u``, ``%x`` and ``%X`` to 32-bit unsigned.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from improvedlib.conversion import itoa

_UINT_MOD = 2**32
_PTR_MOD = 2**64


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument."""


def _require_int(spec: str, value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, not {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {len(value)} characters")
        return value
    return chr(_require_int("c", value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, not {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address %= _PTR_MOD
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _signed(value: Any) -> str:
    return itoa(_require_int("d", value))


def _unsigned(value: Any) -> str:
    return str(_require_int("u", value) % _UINT_MOD)


def _hex_lower(value: Any) -> str:
    return f"{_require_int('x', value) % _UINT_MOD:x}"


def _hex_upper(value: Any) -> str:
    return f"{_require_int('X', value) % _UINT_MOD:X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _render(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            shown = repr(spec) if spec else "end of format"
            raise FormatError(f"unknown conversion after '%': {shown}")
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        yield converter(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    return "".join(_render(fmt, args))


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def printf(fd: int, fmt: str, *args: Any) -> int:
    """Format and write to file descriptor ``fd``; return the number of bytes written.

    Output produced before a bad conversion is still written, then the error
    is raised. File descriptor 0 is refused.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    if fd == 0:
        raise ValueError("invalid file descriptor")
    pieces: list[str] = []
    try:
        for piece in _render(fmt, args):
            pieces.append(piece)
    except (FormatError, TypeError):
        _write_all(fd, "".join(pieces).encode("utf-8"))
        raise
    return _write_all(fd, "".join(pieces).encode("utf-8"))