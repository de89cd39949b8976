from __future__ import annotations
from dataclasses import fields as dc_fields
from typing import Dict, Any, Iterable

from .model import DataMode, MrcHeader, Result

_DTYPE_MAP = {
    DataMode.UINT8: "int8",
    DataMode.INT16: "int16",
    DataMode.FLOAT32: "float32",
    DataMode.COMPLEX_FLOAT64: "complex64",  # two float32 per voxel
    # mode 3 (two int16 per voxel) has no numpy equivalent
}


def dtype_from_mode(mode: int) -> str | None:
    return _DTYPE_MAP.get(mode)


def _jsonable(value: Any) -> Any:
    if isinstance(value, DataMode):
        return value.name.lower()
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, tuple):
        return list(value)
    return value


def header_asdict(header: MrcHeader, *, fields: Iterable[str] | None = None) -> Dict[str, Any]:
    """Return a JSON-serialisable dict of the header (skip None) optionally filtered."""
    payload = {f.name: _jsonable(getattr(header, f.name)) for f in dc_fields(header)}
    payload["voxel_size"] = list(header.voxel_size)
    payload = {k: v for k, v in payload.items() if v is not None}
    if fields:
        wanted = set(fields)
        payload = {k: v for k, v in payload.items() if k in wanted}
    return payload


def result_asdict(res: Result, *, fields: Iterable[str] | None = None) -> Dict[str, Any]:
    """Return a JSON-serialisable dict (skip None) optionally filtered."""
    if not res.success or res.data is None:
        return {"success": False, "error": res.error, "bytes_fetched": res.bytes_fetched}
    payload = {k: v for k, v in res.data.items() if v is not None}
    if fields:
        wanted = set(fields)
        payload = {k: v for k, v in payload.items() if k in wanted}
    payload.update({"success": True, "bytes_fetched": res.bytes_fetched})
    return payload
