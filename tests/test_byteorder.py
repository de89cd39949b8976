"""Tests for byte order detection."""

import struct

import pytest

from mrcconvert.codec.byteorder import detect_byte_order_mismatch
from mrcconvert.core.cursor import ByteCursor
from mrcconvert.core.model import TruncatedInput
from mrcconvert.io import open_reader

from create_tiny_mrc import FOREIGN, NATIVE


def cursor(data: bytes) -> ByteCursor:
    return ByteCursor(open_reader(data))


class TestDetectByteOrder:
    """The column count decides."""

    @pytest.mark.parametrize("columns", [1, 2, 64, 65535])
    def test_plausible_column_count(self, columns):
        assert detect_byte_order_mismatch(cursor(struct.pack(NATIVE + "i", columns))) is False

    @pytest.mark.parametrize("columns", [0, -1, 65536, 100000])
    def test_implausible_column_count(self, columns):
        assert detect_byte_order_mismatch(cursor(struct.pack(NATIVE + "i", columns))) is True

    def test_foreign_order_small_grid(self):
        """A small column count written in the other byte order looks huge."""
        assert detect_byte_order_mismatch(cursor(struct.pack(FOREIGN + "i", 2))) is True

    def test_cursor_rewound(self):
        cur = cursor(struct.pack(NATIVE + "2i", 3, 4))
        detect_byte_order_mismatch(cur)
        assert cur.tell() == 0

    def test_too_short(self):
        with pytest.raises(TruncatedInput):
            detect_byte_order_mismatch(cursor(b"\x01\x00"))
