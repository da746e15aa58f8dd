"""Deterministic splittable xorshift128 generator."""

from .config import DEFAULT_HASH_CONFIG, HashConfig
from .generator import Prng
from .params import key_bytes, pack_params
from .state import State, StateFormatError

__all__ = ["DEFAULT_HASH_CONFIG", "HashConfig", "Prng", "State", "StateFormatError", "key_bytes", "pack_params"]
