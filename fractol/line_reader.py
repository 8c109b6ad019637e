"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` items at a time.

    Each line keeps its trailing newline; the last line of a stream that does
    not end in a newline is returned without one. Whatever was read past the
    end of a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _append(self, chunk: AnyStr) -> None:
        if self._newline is None:
            self._newline = "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[assignment]
        self._pending = chunk if self._pending is None else self._pending + chunk

    def _has_line(self) -> bool:
        pending = self._pending
        return bool(pending) and self._newline is not None and self._newline in pending

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream has nothing left."""
        while not self._has_line():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._append(chunk)

        pending = self._pending
        if not pending or self._newline is None:
            self._pending = None
            return None

        end = pending.find(self._newline)
        if end < 0:
            self._pending = None
            return pending
        line = pending[: end + 1]
        self._pending = pending[end + 1:] or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line