"""I/O layer for mrcconvert - delivers exact byte windows to the decoders."""

# Re-export these for import convenience
from .base import ByteReader
from .local import LocalByteReader, open_local_reader


def open_reader(source) -> LocalByteReader:
    """Factory function returning a ByteReader for a path, bytes or file-like object."""
    return open_local_reader(source)
