"""Fixed-width primitive and 3-vector reads with optional byte reversal.

Values are interpreted in host byte order. When ``swap`` is set the bytes
are reversed first, which is the same as reading them in the opposite
byte order.
"""
from __future__ import annotations
import struct
import sys
from typing import Literal

import numpy as np

from ..core.cursor import ByteCursor

Kind = Literal["int16", "int32", "float32", "float64"]

_CODES: dict[str, str] = {"int16": "h", "int32": "i", "float32": "f", "float64": "d"}

_NATIVE = "<" if sys.byteorder == "little" else ">"
_FOREIGN = ">" if _NATIVE == "<" else "<"

_NP_TYPES = {"int16": np.int16, "int32": np.int32, "float32": np.float32, "float64": np.float64}


def _struct(kind: Kind, swap: bool, count: int = 1) -> struct.Struct:
    try:
        code = _CODES[kind]
    except KeyError:
        raise ValueError(f"Unknown primitive kind {kind!r}") from None
    return struct.Struct(f"{_FOREIGN if swap else _NATIVE}{count}{code}")


def read(cur: ByteCursor, kind: Kind, swap: bool):
    s = _struct(kind, swap)
    return s.unpack(cur.take(s.size))[0]


def read_int16(cur: ByteCursor, swap: bool) -> int: return read(cur, "int16", swap)
def read_int32(cur: ByteCursor, swap: bool) -> int: return read(cur, "int32", swap)
def read_float32(cur: ByteCursor, swap: bool) -> float: return read(cur, "float32", swap)
def read_float64(cur: ByteCursor, swap: bool) -> float: return read(cur, "float64", swap)


def read_many(cur: ByteCursor, kind: Kind, count: int, swap: bool) -> tuple:
    """Read `count` consecutive values of one kind, in file order."""
    s = _struct(kind, swap, count)
    return s.unpack(cur.take(s.size))


def read_int_triple(cur: ByteCursor, swap: bool) -> tuple[int, int, int]:
    return read_many(cur, "int32", 3, swap)


def read_float_triple(cur: ByteCursor, swap: bool) -> tuple[float, float, float]:
    return read_many(cur, "float32", 3, swap)


def byteswap(value, kind: Kind):
    """Return `value` with its host-order bytes reversed.

    The result is a numpy scalar of the same width, so float payloads whose
    swapped bits form a signalling NaN keep those bits.
    """
    if kind not in _NP_TYPES:
        raise ValueError(f"Unknown primitive kind {kind!r}")
    return _NP_TYPES[kind](value).byteswap()
