"""128-bit generator state and its fixed byte layout."""

from __future__ import annotations

from dataclasses import dataclass

from splitrng.config import BYTE_ORDER, STATE_BYTES, WORD_MASK


class StateFormatError(ValueError):
    """Raised when persisted state bytes or text are malformed."""


@dataclass(frozen=True)
class State:
    """Four unsigned 32-bit words in the order a, b, c, d.

    Serialized as 16 bytes: four little-endian words, a first.
    """

    a: int
    b: int
    c: int
    d: int

    def __post_init__(self) -> None:
        for name, word in zip("abcd", self.words):
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"word {name} must be an unsigned 32-bit value, got {word}")

    @classmethod
    def from_words(cls, a: int, b: int, c: int, d: int) -> "State":
        return cls(int(a) & WORD_MASK, int(b) & WORD_MASK, int(c) & WORD_MASK, int(d) & WORD_MASK)

    @classmethod
    def from_bytes(cls, data: bytes) -> "State":
        raw = bytes(data)
        if len(raw) != STATE_BYTES:
            raise StateFormatError(f"state must be exactly {STATE_BYTES} bytes, got {len(raw)}")
        words = [int.from_bytes(raw[i : i + 4], byteorder=BYTE_ORDER, signed=False) for i in range(0, STATE_BYTES, 4)]
        return cls(*words)

    @classmethod
    def from_hex(cls, text: str) -> "State":
        try:
            raw = bytes.fromhex(text)
        except (TypeError, ValueError) as exc:
            raise StateFormatError(f"state hex is malformed: {text!r}") from exc
        return cls.from_bytes(raw)

    @property
    def words(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    @property
    def is_zero(self) -> bool:
        return not (self.a | self.b | self.c | self.d)

    def to_bytes(self) -> bytes:
        return b"".join((word & WORD_MASK).to_bytes(4, byteorder=BYTE_ORDER, signed=False) for word in self.words)

    def to_hex(self) -> str:
        return self.to_bytes().hex()
