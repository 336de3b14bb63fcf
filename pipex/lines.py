"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 10

Text = Union[str, bytes]


class LineReader:
    """Hand out the lines of ``stream``, each with its newline if it had one.

    The stream may be text or binary; lines come back as the same type.
    Data is pulled with ``stream.read(buffer_size)`` only until a newline
    is available, and whatever follows it is kept for the next call.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Text] = None
        self._newline: Optional[Text] = None

    def _fill(self) -> None:
        while self._pending is None or self._newline not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._pending is None:
                self._pending = chunk
                self._newline = (
                    b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
                )
            else:
                self._pending = self._pending + chunk

    def next_line(self) -> Optional[Text]:
        """The next line, or ``None`` once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._newline)
        if index < 0:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[Text]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line