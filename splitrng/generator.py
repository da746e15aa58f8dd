"""xorshift128 generator with deterministic stream splitting."""

from __future__ import annotations

import numpy as np

from splitrng.config import BYTE_ORDER, WORD_MASK
from splitrng.hashing import parameterized_state, seed_state, split_state
from splitrng.state import State

_SIGN_BIT = 1 << 31


def _as_u32(value: int) -> int:
    return int(value) & WORD_MASK


def _as_i32(value: int) -> int:
    value = _as_u32(value)
    return value - (1 << 32) if value & _SIGN_BIT else value


class Prng:
    """32-bit xorshift128 ("xor128", Marsaglia, "Xorshift RNGs", p. 5).

    Not thread-safe. Split one child per thread or task instead of sharing
    an instance.
    """

    __slots__ = ("_a", "_b", "_c", "_d")

    def __init__(self, state: State) -> None:
        self._a, self._b, self._c, self._d = (_as_u32(word) for word in state.words)

    @classmethod
    def new_from_seed(cls, seed: bytes) -> "Prng":
        """Create a generator from the hash of an arbitrary seed buffer."""

        return cls(seed_state(seed))

    @classmethod
    def from_state(cls, state: State) -> "Prng":
        """Resume from a raw state. The all-zero state is accepted and yields zeros forever."""

        return cls(state)

    def state(self) -> State:
        return State(self._a, self._b, self._c, self._d)

    def next_u32(self) -> int:
        t = self._d
        s = self._a
        self._d = self._c
        self._c = self._b
        self._b = s
        t ^= (t << 11) & WORD_MASK
        t ^= t >> 8
        self._a = t ^ s ^ (s >> 19)
        return self._a

    def uniform_below(self, n: int) -> int:
        """Value in [0, n - 1], or 0 when n == 0."""

        return (_as_u32(n) * self.next_u32()) >> 32

    def uniform_upto_inclusive(self, n: int) -> int:
        """Value in [0, n]."""

        n = _as_u32(n)
        if n == WORD_MASK:
            return self.next_u32()
        return self.uniform_below(n + 1)

    def range_inclusive(self, i: int, j: int) -> int:
        """Signed 32-bit value between i and j inclusive, in either order."""

        lo, hi = sorted((_as_i32(i), _as_i32(j)))
        span = _as_u32(hi - lo)
        return _as_i32(lo + self.uniform_upto_inclusive(span))

    def uniform_real(self) -> float:
        """Float in [0.0, 1.0]; 1.0 only for a raw output of 0xFFFFFFFF."""

        return self.next_u32() / WORD_MASK

    def split_mutating(self) -> "Prng":
        """Derive a child from the current state, then advance this generator one step."""

        child = Prng(split_state(self.state()))
        self.next_u32()
        return child

    def split_non_mutating(self) -> "Prng":
        """Derive a child from the current state without advancing this generator.

        Calling this twice without stepping in between returns two identical,
        fully correlated children. Advance the source (or use
        `split_mutating`) between calls when the children must differ.
        """

        return Prng(split_state(self.state()))

    def split_parameterized(self, parameters: bytes) -> "Prng":
        """Derive a child from the current state and an opaque parameter buffer.

        The same (state, parameters) pair always yields the same child. This
        generator is not advanced.
        """

        return Prng(parameterized_state(self.state(), parameters))

    def discard(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        for _ in range(count):
            self.next_u32()

    def fill_u32(self, count: int) -> np.ndarray:
        """Next `count` outputs as a uint32 array, in stream order."""

        if count < 0:
            raise ValueError("count must be non-negative")
        return np.fromiter((self.next_u32() for _ in range(count)), dtype=np.uint32, count=count)

    def numpy_generator(self) -> np.random.Generator:
        """numpy Generator seeded from the full 128-bit state. Does not advance."""

        seed = int.from_bytes(self.state().to_bytes(), byteorder=BYTE_ORDER, signed=False)
        return np.random.Generator(np.random.PCG64(seed))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Prng):
            return NotImplemented
        return self.state() == other.state()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Prng(state=0x{self.state().to_hex()})"
