"""Output targets for emitted statements."""

from __future__ import annotations

import io
from typing import IO


class BufferSink:
    """Appends to a ``bytearray``, possibly one that already holds data.

    ``start`` marks where this call's output begins, so offsets recorded
    during emission are relative to it.
    """

    def __init__(self, buffer: bytearray | None = None) -> None:
        self.buffer = buffer if buffer is not None else bytearray()
        self.start = len(self.buffer)

    def write(self, data: bytes) -> None:
        self.buffer += data

    @property
    def position(self) -> int:
        return len(self.buffer) - self.start

    def written(self) -> bytes:
        """The bytes appended since this sink was created."""
        return bytes(self.buffer[self.start:])


class WriterSink:
    """Forwards bytes to a file-like writer.

    Text writers (``io.TextIOBase``) receive decoded UTF-8.  Errors from the
    writer are not caught: the scan stops and the exception reaches the caller.
    """

    def __init__(self, writer: IO[bytes] | IO[str]) -> None:
        self.writer = writer
        self._text = isinstance(writer, io.TextIOBase)
        self._count = 0

    def write(self, data: bytes) -> None:
        if self._text:
            self.writer.write(data.decode("utf-8"))
        else:
            self.writer.write(data)
        self._count += len(data)

    @property
    def position(self) -> int:
        return self._count


Sink = BufferSink | WriterSink
