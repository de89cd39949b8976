from __future__ import annotations
from typing import Sequence

import numpy as np

from ..core.cursor import ByteCursor
from ..core.model import InvalidExtent, ParseError

# largest voxel count whose float32 payload is still addressable
MAX_VOXELS = np.iinfo(np.int64).max // np.dtype(np.float32).itemsize


def voxel_count(extent: Sequence[int]) -> int:
    """Product of the grid extent, validated."""
    if len(extent) != 3 or any(n <= 0 for n in extent):
        raise InvalidExtent(f"Grid extent must be three positive integers, got {tuple(extent)}")
    nx, ny, nz = (int(n) for n in extent)
    count = nx * ny * nz
    if count > MAX_VOXELS:
        raise InvalidExtent(f"Grid extent {tuple(extent)} overflows ({count} voxels)")
    return count


def decode_volume(
    cur: ByteCursor,
    extent: Sequence[int],
    swap: bool,
    extended_header_len: int = 0,
) -> np.ndarray:
    """Skip the extended header and read the float32 voxel payload.

    Voxels come back flat, in file order (columns fastest), converted to
    native byte order. No axis permutation is applied.

    Raises:
        InvalidExtent: if a grid dimension is non-positive or the voxel count overflows.
        TruncatedInput: if the stream ends before the payload does.
    """
    count = voxel_count(extent)
    if extended_header_len < 0:
        raise ParseError(f"Negative extended header length {extended_header_len}")
    cur.skip(extended_header_len)

    dtype = np.dtype(np.float32)
    if swap:
        dtype = dtype.newbyteorder("S")
    raw = cur.take(count * dtype.itemsize)
    return np.frombuffer(raw, dtype=dtype).astype(np.float32)
