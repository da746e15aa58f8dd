"""Fixed constants and hash layout for the generator."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
STATE_WORDS = 4
STATE_BYTES = STATE_WORDS * (WORD_BITS // 8)
BYTE_ORDER = "little"

SEED_DOMAIN = b"srng-sd0"
SPLIT_DOMAIN = b"srng-sp0"
PARAM_DOMAIN = b"srng-pm0"

SESSION_FORMAT_VERSION = 1


@dataclass(frozen=True)
class HashConfig:
    """Layout of the blake2b state hash.

    Algorithm, digest size and byte order are fixed; only the domain tags and
    the zero fallback word may differ. Changing any field changes every seeded
    or split stream.
    """

    algorithm: str = "blake2b"
    digest_size: int = STATE_BYTES
    byte_order: str = BYTE_ORDER
    seed_domain: bytes = SEED_DOMAIN
    split_domain: bytes = SPLIT_DOMAIN
    param_domain: bytes = PARAM_DOMAIN
    zero_fallback_word_a: int = 1

    def __post_init__(self) -> None:
        if self.algorithm != "blake2b":
            raise ValueError(f"unsupported hash algorithm: {self.algorithm!r}")
        if self.digest_size != STATE_BYTES:
            raise ValueError(f"digest_size must be {STATE_BYTES}, got {self.digest_size}")
        if self.byte_order != BYTE_ORDER:
            raise ValueError(f"byte_order must be {BYTE_ORDER!r}, got {self.byte_order!r}")
        tags = (self.seed_domain, self.split_domain, self.param_domain)
        if len(set(tags)) != len(tags) or len({len(tag) for tag in tags}) != 1:
            raise ValueError("domain tags must be distinct and of equal length")
        if not 0 < self.zero_fallback_word_a <= WORD_MASK:
            raise ValueError("zero_fallback_word_a must be a non-zero 32-bit word")

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        for key, value in payload.items():
            if isinstance(value, bytes):
                payload[key] = value.decode("ascii")
        return payload


DEFAULT_HASH_CONFIG = HashConfig()
