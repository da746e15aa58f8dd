"""Canonical byte encodings for split parameters."""

from __future__ import annotations

import json

import numpy as np


def pack_params(*values: int, dtype: str = "<i4") -> bytes:
    """Encode integers as fixed-width little-endian words.

    `pack_params(x, y)` is the usual key for a tile at (x, y). Values that do
    not fit `dtype` raise rather than wrap. Big-endian dtypes are rejected.
    """

    np_dtype = np.dtype(dtype)
    if np_dtype.kind not in "iu":
        raise ValueError(f"dtype must be an integer type, got {np_dtype}")
    if np_dtype != np_dtype.newbyteorder("<"):
        raise ValueError(f"dtype must be little-endian, got {dtype!r}")
    info = np.iinfo(np_dtype)
    for value in values:
        if not info.min <= int(value) <= info.max:
            raise ValueError(f"{value} does not fit in {np_dtype}")
    return np.asarray([int(value) for value in values], dtype=np_dtype).tobytes()


def key_bytes(*parts: str | int) -> bytes:
    """Encode a labelled key such as ("forest", 3, 7) as compact UTF-8 JSON."""

    for part in parts:
        if not isinstance(part, (str, int)):
            raise TypeError(f"key parts must be str or int, got {type(part).__name__}")
    payload = json.dumps(list(parts), ensure_ascii=False, separators=(",", ":"))
    return payload.encode("utf-8")
