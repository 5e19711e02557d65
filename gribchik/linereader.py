"""Read lines from a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return one line at a time from ``stream``, reading ``buffer_size`` units per call.

    Lines keep their trailing newline; the last line may lack one. Works with
    both binary and text streams.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._reset()

    def _reset(self) -> None:
        self._stash: AnyStr | None = None
        self._newline: AnyStr | None = None
        self._finished = False

    def _has_newline(self) -> bool:
        return self._stash is not None and self._newline in self._stash

    def _fill(self) -> None:
        while True:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                return
            if self._stash is None:
                self._newline = b"\n" if isinstance(chunk, bytes) else "\n"
                self._stash = chunk
            else:
                self._stash += chunk
            if self._newline in chunk:
                return

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        if self._finished:
            self._reset()
            return None
        if not self._has_newline():
            try:
                self._fill()
            except BaseException:
                self._reset()
                raise
        if not self._stash:
            self._reset()
            return None
        stash = self._stash
        end = stash.find(self._newline)
        if end < 0:
            self._stash = stash[:0]
            self._finished = True
            return stash
        self._stash = stash[end + 1:]
        return stash[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line