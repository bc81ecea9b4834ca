"""Read lines from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Return one line at a time from a byte or text stream, newline included."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while True:
            if pending:
                newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
                if newline in pending:
                    break
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
        line, sep, rest = pending.partition(newline)  # type: ignore[arg-type]
        self._pending = rest if sep else None
        return line + sep

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> list[AnyStr]:
    """Read every remaining line of ``stream``."""
    return list(LineReader(stream, buffer_size))