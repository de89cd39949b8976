"""Positional decoders for the MRC/CCP4 header and voxel payload."""

from .axes import normalize_cell_angles, validate_axis_order
from .byteorder import detect_byte_order_mismatch
from .header import decode_header
from .volume import decode_volume

__all__ = [
    "decode_header", "decode_volume",
    "detect_byte_order_mismatch", "validate_axis_order", "normalize_cell_angles",
]
