"""mrcconvert - decode MRC/CCP4/EMDB density maps into a header record and float32 voxels."""

import warnings

from .core.model import (                                             # re-export
    DataMode, MrcHeader, MrcFile, Result,
    ParseError, TruncatedInput, InvalidExtent,
)
from .core.cursor import ByteCursor
from .codec import decode_header, decode_volume
from .io import ByteReader, open_reader


def decode_map(reader: ByteReader, *, crystallographic: bool = False) -> MrcFile:
    """Decode header, extended header and voxels from an open ByteReader."""
    cur = ByteCursor(reader)
    header = decode_header(
        cur, crystallographic=crystallographic, capture_extended_header=True,
    )

    # unrecognised modes were already reported by the header decoder
    if isinstance(header.data_mode, DataMode) and header.data_mode != DataMode.FLOAT32:
        warnings.warn(f"Data mode {header.data_mode!r} is not float32; voxels are read as float32")

    data = decode_volume(
        cur, header.extent, header.byte_order_mismatch, header.num_bytes_extended_header,
    )
    return MrcFile(header=header, data=data)


def read_map(source, *, crystallographic: bool = False) -> MrcFile:
    """Read header and voxels from a path, bytes or binary file-like object."""
    with open_reader(source) as reader:
        return decode_map(reader, crystallographic=crystallographic)


def read_map_header(source, *, crystallographic: bool = False) -> MrcHeader:
    """Read only the 1024-byte header."""
    with open_reader(source) as reader:
        return decode_header(ByteCursor(reader), crystallographic=crystallographic)


__all__ = [
    "read_map", "read_map_header", "decode_map",
    "DataMode", "MrcHeader", "MrcFile", "Result",
    "ParseError", "TruncatedInput", "InvalidExtent",
]
