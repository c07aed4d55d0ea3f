"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from typing import Iterator

__all__ = ["LineReader"]

DEFAULT_BUFFER_SIZE = 10
_MAX_FD = 4095


class LineReader:
    """Yield lines, newline included, from a file descriptor or file object.

    The source is read ``buffer_size`` units at a time; data read past the
    end of a line is kept for the next call. Lines are bytes or str,
    whichever the source produces.
    """

    def __init__(self, source, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, int):
            if not 0 <= source <= _MAX_FD:
                raise ValueError(f"file descriptor out of range: {source}")
        elif not hasattr(source, "read"):
            raise TypeError("source must be a file descriptor or have a read method")
        self._source = source
        self._buffer_size = buffer_size
        self._pending = None

    def _read_chunk(self):
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def read_line(self):
        """Return the next line, or None once the source is exhausted."""
        while True:
            if self._pending:
                newline = b"\n" if isinstance(self._pending, bytes) else "\n"
                end = self._pending.find(newline)
                if end >= 0:
                    line = self._pending[: end + 1]
                    self._pending = self._pending[end + 1 :]
                    return line
            chunk = self._read_chunk()
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            return None
        line = self._pending
        self._pending = line[:0]
        return line

    def __iter__(self) -> Iterator:
        while (line := self.read_line()) is not None:
            yield line