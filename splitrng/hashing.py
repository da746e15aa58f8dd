"""Domain-separated hashing of byte buffers into generator state."""

from __future__ import annotations

import hashlib
import logging

from splitrng.config import DEFAULT_HASH_CONFIG, HashConfig
from splitrng.state import State

logger = logging.getLogger(__name__)


def _require_bytes(name: str, value: object) -> bytes:
    if isinstance(value, str) or not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
    return bytes(value)


def hash_to_state(domain: bytes, payload: bytes, *, config: HashConfig = DEFAULT_HASH_CONFIG) -> State:
    """Hash `domain + payload` into a state that is never all zeros.

    The digest is blake2b with a 16-byte output, read as four little-endian
    words a, b, c, d. An all-zero digest maps to a=1 and b=c=d=0.
    """

    digest = hashlib.blake2b(domain + payload, digest_size=config.digest_size).digest()
    state = State.from_bytes(digest)
    if state.is_zero:
        logger.debug("zero digest for domain %r, applying fallback", domain)
        state = State(config.zero_fallback_word_a, 0, 0, 0)
    return state


def seed_state(seed: bytes, *, config: HashConfig = DEFAULT_HASH_CONFIG) -> State:
    """State for a fresh generator seeded with `seed`."""

    return hash_to_state(config.seed_domain, _require_bytes("seed", seed), config=config)


def split_state(parent: State, *, config: HashConfig = DEFAULT_HASH_CONFIG) -> State:
    return hash_to_state(config.split_domain, parent.to_bytes(), config=config)


def parameterized_state(parent: State, parameters: bytes, *, config: HashConfig = DEFAULT_HASH_CONFIG) -> State:
    # Parent bytes are fixed width, so parent/parameter boundaries are unambiguous.
    data = _require_bytes("parameters", parameters)
    return hash_to_state(config.param_domain, parent.to_bytes() + data, config=config)
