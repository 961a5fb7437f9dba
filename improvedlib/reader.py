"""Line-by-line reading from file descriptors with per-descriptor buffering."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 42
MAX_FD = 1024


class LineReader:
    """Read lines from a file descriptor, ``buffer_size`` bytes at a time.

    Lines keep their trailing newline; the last line may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0 or fd > MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once the input is exhausted.

        A read error discards any buffered data and is raised.
        """
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd``, keeping leftover data between calls."""
    if fd < 0 or fd > MAX_FD:
        raise ValueError(f"file descriptor out of range: {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    return reader.read_line()


def reset(fd: int) -> None:
    """Forget any data buffered for ``fd``."""
    _readers.pop(fd, None)