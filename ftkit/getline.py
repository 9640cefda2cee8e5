"""Line-by-line reading from file descriptors, one buffer per descriptor."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional, Union

BUFFER_SIZE = 1024

Text = Union[str, bytes]


def find_newline(text: Optional[Text]) -> Optional[int]:
    """Return the index of the first newline in ``text``, or None."""
    if text is None:
        return None
    newline = b"\n" if isinstance(text, (bytes, bytearray)) else "\n"
    index = text.find(newline)
    return None if index == -1 else index


def _descriptor(fd: object) -> int:
    if isinstance(fd, int) and not isinstance(fd, bool):
        return fd
    fileno = getattr(fd, "fileno", None)
    if callable(fileno):
        return fileno()
    raise TypeError(f"expected a file descriptor, got {type(fd).__name__}")


class LineReader:
    """Reads lines from any number of descriptors, keeping leftovers per descriptor."""

    def __init__(self, buffer_size: int = BUFFER_SIZE, encoding: str = "utf-8") -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._pending: Dict[int, bytes] = {}

    def read_line(self, fd: object) -> Optional[str]:
        """Return the next line of ``fd`` with its newline, or None at end of input.

        A negative descriptor gives None. The last line is returned without a
        newline if the input does not end with one.
        """
        descriptor = _descriptor(fd)
        if descriptor < 0:
            return None
        buf = self._pending.pop(descriptor, b"")
        while find_newline(buf) is None:
            chunk = os.read(descriptor, self.buffer_size)
            if not chunk:
                break
            buf += chunk
        if not buf:
            return None
        position = find_newline(buf)
        if position is None:
            line, rest = buf, b""
        else:
            line, rest = buf[: position + 1], buf[position + 1:]
        if rest:
            self._pending[descriptor] = rest
        return line.decode(self.encoding)

    def lines(self, fd: object) -> Iterator[str]:
        """Yield every remaining line of ``fd``."""
        while True:
            line = self.read_line(fd)
            if line is None:
                return
            yield line