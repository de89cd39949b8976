"""Sequential decode of the 1024-byte MRC/CCP4 header.

Layout follows the EMDB map distribution format (words are 4 bytes):

    1-3     NC, NR, NS          column/row/section counts
    4       MODE                voxel datatype
    5-7     NCSTART..NSSTART    grid origin
    8-10    NX, NY, NZ          grid extent
    11-13   X/Y/Z_LENGTH        cell lengths (Angstrom)
    14-16   ALPHA, BETA, GAMMA  cell angles
    17-19   MAPC, MAPR, MAPS    axis order, 1-based
    20-22   AMIN, AMAX, AMEAN
    23      ISPG                space group
    24      NSYMBT              extended header length in bytes
    25-37   LSKFLG, SKWMAT, SKWTRN (crystallographic) or unused
    38-52   EXTRA
    53      MAP                 format identifier
    54      MACHST              machine stamp
    55      RMS
    56      NLABL
    57-256  10 labels of 80 characters
"""
from __future__ import annotations
import warnings

from ..core.cursor import ByteCursor
from ..core.model import LABEL_SIZE, NUM_LABELS, DataMode, MrcHeader
from .axes import normalize_cell_angles, validate_axis_order
from .byteorder import detect_byte_order_mismatch
from .primitives import (
    read_float32,
    read_float_triple,
    read_int32,
    read_int_triple,
    read_many,
)

FORMAT_IDENTIFIER = "MAP "


def _data_mode(raw: int) -> DataMode | int:
    try:
        return DataMode(raw)
    except ValueError:
        warnings.warn(f"Unrecognized MRC data mode {raw}")
        return raw


def _text(raw: bytes) -> str:
    # latin-1 maps every byte to one character, so padding survives untouched
    return raw.decode("latin-1")


def decode_header(
    cur: ByteCursor,
    *,
    crystallographic: bool = False,
    capture_extended_header: bool = False,
) -> MrcHeader:
    """Decode the header starting at the cursor position.

    The cursor ends on the first byte after the label block. The extended
    header is not consumed; its length is recorded and, with
    `capture_extended_header`, its bytes are peeked into the header.

    Raises:
        TruncatedInput: if the stream ends inside the header, or inside the
            extended header when it is captured.
    """
    hdr = MrcHeader()
    hdr.is_crystallographic = crystallographic

    swap = detect_byte_order_mismatch(cur)
    hdr.byte_order_mismatch = swap

    hdr.num_crs = read_int_triple(cur, swap)
    hdr.data_mode = _data_mode(read_int32(cur, swap))
    hdr.crs_start = read_int_triple(cur, swap)
    hdr.extent = read_int_triple(cur, swap)
    hdr.cell_length = read_float_triple(cur, swap)
    hdr.cell_angles = normalize_cell_angles(read_float_triple(cur, swap))

    mapc, mapr, maps = read_int_triple(cur, swap)
    hdr.crs_to_xyz = validate_axis_order((mapc - 1, mapr - 1, maps - 1))

    hdr.min_value = read_float32(cur, swap)
    hdr.max_value = read_float32(cur, swap)
    hdr.mean_value = read_float32(cur, swap)

    hdr.space_group = read_int32(cur, swap)
    num_bytes_extended_header = read_int32(cur, swap)

    if crystallographic:
        hdr.has_skew_matrix = read_int32(cur, swap) == 1
        if hdr.has_skew_matrix:
            # S11, S12, S13, S21, ..., S33
            hdr.skew_matrix = read_many(cur, "float32", 9, swap)
            hdr.skew_translation = read_float_triple(cur, swap)
    else:
        hdr.extraskew = read_many(cur, "float32", 13, swap)

    hdr.extra = read_many(cur, "float32", 15, swap)

    hdr.format_identifier = _text(cur.take(4))
    if hdr.format_identifier != FORMAT_IDENTIFIER:
        warnings.warn(f"Invalid MRC format identifier: {hdr.format_identifier!r}")

    hdr.machine_stamp = read_int32(cur, swap)
    hdr.rms_value = read_float32(cur, swap)
    hdr.num_labels = read_int32(cur, swap)

    # all ten labels are always present, whatever NLABL says
    hdr.labels = [_text(cur.take(LABEL_SIZE)) for _ in range(NUM_LABELS)]

    hdr.num_bytes_extended_header = num_bytes_extended_header
    if capture_extended_header and num_bytes_extended_header > 0:
        hdr.extended_header = cur.peek(num_bytes_extended_header)
    return hdr
