"""Read lines from a stream in fixed-size chunks, keeping what is left over."""

from __future__ import annotations

from typing import Any, AnyStr, Generic, Iterator

BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Return one line at a time from a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stored: AnyStr | None = None

    def _fill(self) -> None:
        while self._stored is None or self._newline() not in self._stored:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            self._stored = chunk if self._stored is None else self._stored + chunk

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._stored, bytes) else "\n"  # type: ignore[return-value]

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream has nothing more."""
        self._fill()
        if not self._stored:
            self._stored = None
            return None
        line, sep, rest = self._stored.partition(self._newline())
        self._stored = rest if sep and rest else None
        return line + sep

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def iter_lines(stream: Any, buffer_size: int = BUFFER_SIZE) -> Iterator[Any]:
    """Yield the lines of ``stream``, each with its trailing newline."""
    yield from LineReader(stream, buffer_size)