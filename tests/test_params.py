from __future__ import annotations

import pytest

from splitrng.params import key_bytes, pack_params


def test_pack_params_is_fixed_width_little_endian() -> None:
    assert pack_params(1, -1) == b"\x01\x00\x00\x00\xff\xff\xff\xff"
    assert pack_params(258, dtype="<u2") == b"\x02\x01"
    assert pack_params() == b""


def test_pack_params_rejects_overflow() -> None:
    with pytest.raises(ValueError):
        pack_params(2**31)


def test_pack_params_rejects_float_dtype() -> None:
    with pytest.raises(ValueError):
        pack_params(1, dtype="<f8")


def test_key_bytes_is_canonical_json() -> None:
    assert key_bytes("forest", 3, 7) == b'["forest",3,7]'
    assert key_bytes("a:b") != key_bytes("a", "b")


def test_key_bytes_rejects_floats() -> None:
    with pytest.raises(TypeError):
        key_bytes("x", 1.5)  # type: ignore[arg-type]


def test_pack_params_rejects_big_endian_dtype() -> None:
    with pytest.raises(ValueError):
        pack_params(258, dtype=">u2")
