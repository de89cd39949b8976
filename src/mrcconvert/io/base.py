"""Base protocol for the I/O layer."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteReader(Protocol):
    """Protocol for random-access byte sources."""

    bytes_fetched: int  # running total

    @property
    def size(self) -> int:
        """Total size of the source in bytes."""
        ...

    def fetch(self, start: int, length: int) -> bytes:
        """Return exactly `length` bytes starting at absolute offset `start`.
        If not enough data can be fetched → raise IOError.
        """
        ...
