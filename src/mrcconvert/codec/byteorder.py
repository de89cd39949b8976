from __future__ import annotations

from ..core.cursor import ByteCursor
from .primitives import read_int32

# A column count outside (0, 65536) is taken as a sign of foreign byte order.
# Maps with 65536 or more columns are indistinguishable from swapped ones.
MAX_COLUMNS = 65536


def detect_byte_order_mismatch(cur: ByteCursor) -> bool:
    """Peek at the column count (word 1) and decide whether bytes must be swapped.

    The cursor is left where it was.
    """
    start = cur.tell()
    try:
        columns = read_int32(cur, swap=False)
    finally:
        cur.seek(start)
    return columns <= 0 or columns >= MAX_COLUMNS
