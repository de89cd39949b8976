"""Writers for the raw voxel sidecar and its text descriptor."""

from __future__ import annotations
from pathlib import Path
from typing import Union

import numpy as np

from .core.model import MrcHeader

PathLike = Union[str, Path]

RAW_SUFFIX = ".raw"
DESCRIPTOR_SUFFIX = ".dat"


def sidecar_paths(stem: PathLike) -> tuple[Path, Path]:
    """Return (raw, descriptor) paths by appending the suffixes to `stem`."""
    stem = str(stem)
    return Path(stem + RAW_SUFFIX), Path(stem + DESCRIPTOR_SUFFIX)


def write_raw(data: np.ndarray, path: PathLike) -> int:
    """Dump voxels as consecutive host-order float32 values; return bytes written."""
    arr = np.ascontiguousarray(data, dtype=np.float32)
    arr.tofile(str(path))
    return arr.nbytes


def format_descriptor(header: MrcHeader, raw_path: PathLike) -> str:
    nx, ny, nz = header.extent
    lx, ly, lz = header.cell_length
    lines = [
        f"Rawfile: {raw_path}",
        f"Resolution: {nx} {ny} {nz}",
        "Format: FLOAT32",
        f"BasisVector1: {lx:g} 0 0",
        f"BasisVector2: 0 {ly:g} 0",
        f"BasisVector3: 0 0 {lz:g}",
    ]
    return "\n".join(lines) + "\n"


def write_descriptor(header: MrcHeader, raw_path: PathLike, path: PathLike) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(format_descriptor(header, raw_path))
