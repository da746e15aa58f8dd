from __future__ import annotations

from splitrng.generator import Prng
from splitrng.state import State

XOR128_FROM_1234 = [
    8229,
    14398,
    10284,
    8229,
    16787720,
    12591326,
    25176482,
    8396991,
    13107662,
    17766361,
    29549411,
    4636220,
]


def test_reference_vector_from_small_state() -> None:
    prng = Prng.from_state(State(1, 2, 3, 4))

    assert [prng.next_u32() for _ in XOR128_FROM_1234] == XOR128_FROM_1234
    assert prng.state() == State(4636220, 29549411, 17766361, 13107662)


def test_reference_vector_with_high_bits_set() -> None:
    # Exercises wraparound of the left shift and unsigned right shifts.
    prng = Prng.from_state(State(0xFFFFFFFF, 0x80000000, 0x12345678, 0xDEADBEEF))

    outputs = [prng.next_u32() for _ in range(6)]

    assert outputs == [0x4C167C29, 0xFC216445, 0x7CA17BC1, 0x7CA173AD, 0x83A9BF24, 0x745DE058]


def test_outputs_are_unsigned_32_bit() -> None:
    prng = Prng.new_from_seed(b"width")
    for _ in range(5000):
        value = prng.next_u32()
        assert 0 <= value <= 0xFFFFFFFF


def test_zero_state_is_a_fixed_point() -> None:
    prng = Prng.from_state(State(0, 0, 0, 0))

    assert [prng.next_u32() for _ in range(100)] == [0] * 100
    assert prng.state().is_zero


def test_seeded_streams_are_deterministic() -> None:
    for seed in (b"", b"\x00", b"MistyForge", bytes(range(256))):
        first = Prng.new_from_seed(seed)
        second = Prng.new_from_seed(seed)
        assert [first.next_u32() for _ in range(10_000)] == [second.next_u32() for _ in range(10_000)]


def test_fill_u32_matches_sequential_outputs() -> None:
    batch = Prng.from_state(State(1, 2, 3, 4)).fill_u32(len(XOR128_FROM_1234))

    assert batch.dtype.name == "uint32"
    assert batch.tolist() == XOR128_FROM_1234


def test_discard_skips_outputs() -> None:
    prng = Prng.from_state(State(1, 2, 3, 4))
    prng.discard(4)

    assert prng.next_u32() == XOR128_FROM_1234[4]
