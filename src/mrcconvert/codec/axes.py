from __future__ import annotations
from typing import Sequence

IDENTITY_AXES = (0, 1, 2)
ORTHOGONAL_ANGLES = (90.0, 90.0, 90.0)

_ANGLE_EPS = 1e-5


def validate_axis_order(crs_to_xyz: Sequence[int]) -> tuple[int, int, int]:
    """Return the 0-based column/row/section to XYZ mapping, or identity if it is not a permutation of 0, 1, 2."""
    order = tuple(int(v) for v in crs_to_xyz)
    if len(order) != 3 or set(order) != set(IDENTITY_AXES):
        return IDENTITY_AXES
    return order


def normalize_cell_angles(angles: Sequence[float]) -> tuple[float, float, float]:
    """Unset cell angles (all zero) mean an orthogonal cell."""
    angles = tuple(float(a) for a in angles)
    if all(abs(a) < _ANGLE_EPS for a in angles):
        return ORTHOGONAL_ANGLES
    return angles
