"""Read a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, AnyStr

DEFAULT_BUFFER_SIZE = 15


class LineReader:
    """Return one line at a time from a file object or file descriptor.

    Each line keeps its trailing newline; the last line may lack one. The
    stream may yield either ``str`` or ``bytes``.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(stream, int) and stream < 0:
            raise ValueError("file descriptor must not be negative")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Any = None

    def _read_chunk(self) -> AnyStr:
        if isinstance(self._stream, int):
            return os.read(self._stream, self._buffer_size)
        return self._stream.read(self._buffer_size)

    def _newline_index(self) -> int:
        if not self._stash:
            return -1
        newline = b"\n" if isinstance(self._stash, bytes) else "\n"
        return self._stash.find(newline)

    def read_line(self) -> Any:
        """Return the next line, or None once the stream is exhausted."""
        while (index := self._newline_index()) < 0:
            try:
                chunk = self._read_chunk()
            except BaseException:
                self._stash = None
                raise
            if not chunk:
                line, self._stash = self._stash, None
                return line or None
            self._stash = chunk if self._stash is None else self._stash + chunk
        line = self._stash[: index + 1]
        self._stash = self._stash[index + 1:]
        return line

    def __iter__(self) -> Iterator[Any]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[Any]:
    """Yield every line of ``stream``."""
    yield from LineReader(stream, buffer_size)