"""Byte-buffer routines with the semantics of the classic C memory functions.

Buffers are mutable bytes-like objects such as ``bytearray`` or writable
``memoryview``. Positions are indexes, and ``None`` stands for "not found".
The ``strl*`` functions treat a buffer as a NUL-terminated C string held in
storage of fixed capacity.
"""

from __future__ import annotations

from typing import Optional, Union

_INT_MAX = 2**31 - 1

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(name: str, buf: ReadableBuffer, n: int) -> int:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"n ({n}) exceeds the length of {name} ({len(buf)})")
    return n


def _cstr(data: ReadableBuffer) -> bytes:
    """Return the bytes of ``data`` up to, not including, the first NUL."""
    raw = bytes(data)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_span("buf", buf, n)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``nmemb`` elements of ``size`` bytes each.

    Raises ``OverflowError`` when the total would exceed the C ``int`` limit.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    if not nmemb or not size:
        return bytearray()
    if _INT_MAX // nmemb < size:
        raise OverflowError(f"allocation of {nmemb} x {size} bytes is too large")
    return bytearray(nmemb * size)


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``; return ``buf``."""
    _check_span("buf", buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``c`` among the first ``n``."""
    _check_span("buf", buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch, or 0."""
    _check_span("a", a, n)
    _check_span("b", b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    _check_span("dest", dest, n)
    _check_span("src", src, n)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes like :func:`memcpy`, correct even when the regions overlap."""
    _check_span("dest", dest, n)
    _check_span("src", src, n)
    dest[:n] = bytes(src[:n])
    return dest


def strlcpy(dst: Buffer, src: ReadableBuffer, size: int) -> int:
    """Copy the C string ``src`` into ``dst`` of capacity ``size``, NUL-terminated.

    At most ``size - 1`` bytes are copied. Returns the length of ``src``, so a
    result of ``size`` or more means the copy was truncated.
    """
    _check_span("dst", dst, size)
    text = _cstr(src)
    if size > 0:
        count = min(len(text), size - 1)
        dst[:count] = text[:count]
        dst[count] = 0
    return len(text)


def strlcat(dst: Buffer, src: ReadableBuffer, size: int) -> int:
    """Append the C string ``src`` to the C string in ``dst`` of capacity ``size``.

    Returns the length of the string it tried to create: ``len(dst) + len(src)``,
    or ``size + len(src)`` when ``dst`` already fills the capacity.
    """
    _check_span("dst", dst, size)
    text = _cstr(src)
    dst_len = len(_cstr(dst))
    if size > dst_len:
        count = min(len(text), size - dst_len - 1)
        dst[dst_len : dst_len + count] = text[:count]
        dst[dst_len + count] = 0
        return len(text) + dst_len
    return len(text) + size