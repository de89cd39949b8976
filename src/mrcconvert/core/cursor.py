from __future__ import annotations

from ..io.base import ByteReader
from .model import TruncatedInput


class ByteCursor:
    """Forward cursor over a ByteReader.

    Every read goes through ``take``; running past the end of the source
    raises TruncatedInput instead of returning short data.
    """
    __slots__ = ("reader", "pos", "size")

    def __init__(self, reader: ByteReader, pos: int = 0):
        self.reader = reader
        self.pos = pos
        self.size = reader.size

    def remaining(self) -> int: return max(self.size - self.pos, 0)
    def tell(self) -> int: return self.pos

    def seek(self, pos: int) -> None:
        if not (0 <= pos <= self.size):
            raise TruncatedInput(f"seek to {pos} outside of {self.size}-byte source")
        self.pos = pos

    def skip(self, n: int) -> None:
        if n < 0:
            raise ValueError("cannot skip backwards")
        self.seek(self.pos + n)

    def peek(self, n: int) -> bytes:
        if n == 0:
            return b""
        if self.pos + n > self.size:
            raise TruncatedInput(f"need {n} bytes at offset {self.pos}, only {self.remaining()} left")
        try:
            return self.reader.fetch(self.pos, n)
        except (IOError, OSError) as e:
            raise TruncatedInput(str(e)) from e

    def take(self, n: int) -> bytes:
        out = self.peek(n)
        self.pos += n
        return out
