"""Local file readers using mmap."""

import io
import mmap
from pathlib import Path
from typing import BinaryIO, Union

Source = Union[Path, str, bytes, bytearray, BinaryIO]


class LocalByteReader:
    """Synchronous local file reader using mmap."""

    def __init__(self, source: Source):
        self.bytes_fetched = 0
        self._file = None
        self._mmap = None
        self._data = None  # For in-memory sources
        self._should_close_file = False

        if isinstance(source, (bytes, bytearray, memoryview)):
            self._data = bytes(source)
        elif hasattr(source, 'read'):
            # BinaryIO object
            self._file = source
            if isinstance(source, io.BytesIO):
                self._data = source.getvalue()
        else:
            # Path or str
            self._file = open(source, 'rb')
            self._should_close_file = True

    def _ensure_mmap(self):
        """Create mmap on first access."""
        if self._mmap is None and self._data is None:
            if not self._file.seekable():
                raise IOError("File is not seekable, cannot use mmap")
            self._file.seek(0, 2)  # Seek to end
            if self._file.tell() == 0:
                # mmap refuses empty files
                self._data = b""
                return
            try:
                self._mmap = mmap.mmap(self._file.fileno(), 0, access=mmap.ACCESS_READ)
            except (io.UnsupportedOperation, OSError):
                # Fallback for files that don't support fileno()
                self._file.seek(0)
                self._data = self._file.read()

    @property
    def size(self) -> int:
        """Return the total size of the source in bytes."""
        self._ensure_mmap()
        source = self._mmap if self._mmap is not None else self._data
        return len(source)

    def fetch(self, start: int, length: int) -> bytes:
        """Return exactly `length` bytes starting at absolute offset `start`."""
        self._ensure_mmap()

        if start < 0:
            raise IOError("Start offset cannot be negative")

        # Use either mmap or in-memory data
        source = self._mmap if self._mmap is not None else self._data

        if start + length > len(source):
            raise IOError(f"Not enough data: requested {length} bytes at offset {start}, "
                          f"but file only has {len(source)} bytes")

        data = source[start:start + length]
        self.bytes_fetched += len(data)
        return data

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close mmap and file if we opened it."""
        if self._mmap is not None:
            self._mmap.close()
            self._mmap = None
        if self._should_close_file and self._file is not None:
            self._file.close()
            self._file = None


def open_local_reader(source: Source) -> LocalByteReader:
    """Create a synchronous local byte reader."""
    return LocalByteReader(source)
