from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict

import numpy as np

NUM_LABELS = 10
LABEL_SIZE = 80

EMPTY_LABEL = " " * LABEL_SIZE
EMDB_LABEL = "::::EMDataBank.org::::EMD-xxxx::::Own Data Following EMDB convention::::::::::::"


class DataMode(IntEnum):
    """Voxel datatype stored in header word 4."""
    UINT8 = 0
    INT16 = 1
    FLOAT32 = 2
    COMPLEX_INT32 = 3
    COMPLEX_FLOAT64 = 4


def _emdb_labels() -> list[str]:
    return [EMDB_LABEL] + [EMPTY_LABEL] * (NUM_LABELS - 1)


@dataclass(slots=True)
class MrcHeader:
    """Metadata of an MRC/CCP4/EMDB map.

    A fresh instance carries the EMDB defaults; the header decoder overwrites
    the fields in file order. ``is_crystallographic`` is chosen by the caller
    before decoding and selects whether words 25-37 hold a skew matrix or the
    unused ``extraskew`` block.
    """
    byte_order_mismatch: bool = False
    num_crs: tuple[int, int, int] = (0, 0, 0)
    data_mode: DataMode | int = DataMode.FLOAT32
    crs_start: tuple[int, int, int] = (0, 0, 0)
    extent: tuple[int, int, int] = (0, 0, 0)
    cell_length: tuple[float, float, float] = (0.0, 0.0, 0.0)
    cell_angles: tuple[float, float, float] = (90.0, 90.0, 90.0)
    crs_to_xyz: tuple[int, int, int] = (0, 1, 2)
    min_value: float = 0.0
    max_value: float = 0.0
    mean_value: float = 0.0
    rms_value: float = 0.0
    space_group: int = 1
    num_bytes_extended_header: int = 0
    is_crystallographic: bool = False
    has_skew_matrix: bool = False
    skew_matrix: tuple[float, ...] = (0.0,) * 9
    skew_translation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    extraskew: tuple[float, ...] = (0.0,) * 13
    extra: tuple[float, ...] = (0.0,) * 15
    format_identifier: str = "MAP "
    machine_stamp: int = 1145110528  # 0x44410000
    num_labels: int = 1
    labels: list[str] = field(default_factory=_emdb_labels)
    extended_header: bytes = b""

    # aliases used by the format descriptions
    @property
    def grid_origin(self) -> tuple[int, int, int]:
        return self.crs_start

    @property
    def grid_extent(self) -> tuple[int, int, int]:
        return self.extent

    @property
    def column_row_section_to_xyz(self) -> tuple[int, int, int]:
        return self.crs_to_xyz

    @property
    def swap_bytes(self) -> bool:
        return self.byte_order_mismatch

    @property
    def num_voxels(self) -> int:
        nx, ny, nz = self.extent
        return nx * ny * nz

    @property
    def data_type(self) -> str | None:
        from .util import dtype_from_mode
        return dtype_from_mode(self.data_mode)

    @property
    def voxel_size(self) -> tuple[float | None, float | None, float | None]:
        """Edge length of a single voxel along X, Y, Z in Angstrom (None if unknown)."""
        return tuple(
            (length / n) if (n and length) else None
            for length, n in zip(self.cell_length, self.extent)
        )


@dataclass(slots=True)
class MrcFile:
    header: MrcHeader
    data: np.ndarray  # flat float32, column fastest

    def grid(self) -> np.ndarray:
        """Voxels as a (sections, rows, columns) array; the axis permutation is not applied."""
        nx, ny, nz = self.header.extent
        return self.data.reshape((nz, ny, nx))


@dataclass(slots=True)
class Result:
    success: bool
    data: Dict[str, Any] | None
    error: str | None
    bytes_fetched: int         # filled by I/O layer


class ParseError(RuntimeError):
    """Raised when a map cannot be decoded."""
    pass


class TruncatedInput(ParseError):
    """The stream ended before a field or block was fully read."""
    pass


class InvalidExtent(ParseError):
    """Grid dimensions are non-positive or too large to address."""
    pass
