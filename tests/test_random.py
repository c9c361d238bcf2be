from itertools import islice

import pytest

from gameframe import random as grandom
from gameframe.random import Generator, Pcg32, UINT32_MAX


def test_pcg32_reference_sequence():
    rng = Pcg32(42, stream=54)
    outputs = [rng.next_uint32() for _ in range(6)]
    assert outputs == [
        0xA15C02B7,
        0x7B47F409,
        0xBA1D3330,
        0x83D2F293,
        0xBFA4784B,
        0xCBED606E,
    ]


def test_pcg32_iteration_matches_next_uint32():
    a = Pcg32(42, stream=54)
    b = Pcg32(42, stream=54)
    assert list(islice(a, 5)) == [b.next_uint32() for _ in range(5)]


def test_pcg32_seed_restarts_default_stream():
    rng = Pcg32(99, stream=7)
    rng.next_uint32()
    rng.seed(99)
    fresh = Pcg32(99)
    assert [rng.next_uint32() for _ in range(8)] == [fresh.next_uint32() for _ in range(8)]


def test_pcg32_outputs_are_32_bit():
    rng = Pcg32(123)
    assert all(0 <= rng.next_uint32() <= UINT32_MAX for _ in range(1000))


def test_bounded_one_is_always_zero():
    rng = Pcg32(5)
    assert {rng.bounded(1) for _ in range(50)} == {0}


def test_bounded_full_range_is_raw_output():
    a, b = Pcg32(17), Pcg32(17)
    assert [a.bounded(1 << 32) for _ in range(10)] == [b.next_uint32() for _ in range(10)]


@pytest.mark.parametrize("bound", [0, -1, (1 << 32) + 1])
def test_bounded_rejects_bad_bounds(bound):
    with pytest.raises(ValueError):
        Pcg32(1).bounded(bound)


def test_bounded_stays_below_bound():
    rng = Pcg32(8)
    assert all(0 <= rng.bounded(7) < 7 for _ in range(500))


def test_same_seed_same_sequence():
    a, b = Generator(7), Generator(7)
    assert [a.randint(0, 1000) for _ in range(20)] == [b.randint(0, 1000) for _ in range(20)]


def test_set_seed_restarts_sequence():
    g = Generator(3)
    first = [g.randint(0, 100) for _ in range(10)]
    g.set_seed(3)
    assert [g.randint(0, 100) for _ in range(10)] == first


def test_seed_is_taken_as_32_bit():
    a, b = Generator((1 << 32) + 5), Generator(5)
    assert [a.randint(0, 50) for _ in range(10)] == [b.randint(0, 50) for _ in range(10)]


def test_randint_bounds_are_inclusive():
    g = Generator(1)
    values = {g.randint(-2, 2) for _ in range(500)}
    assert values == set(range(-2, 3))


def test_randint_single_argument_starts_at_zero():
    g = Generator(2)
    values = {g.randint(3) for _ in range(500)}
    assert values == set(range(4))


def test_randint_equal_bounds():
    g = Generator(4)
    assert {g.randint(9, 9) for _ in range(20)} == {9}


def test_randint_empty_range_raises():
    with pytest.raises(ValueError):
        Generator(1).randint(5, 4)


def test_uniform_within_bounds():
    g = Generator(10)
    assert all(-2.0 <= g.uniform(-2.0, 3.0) <= 3.0 for _ in range(1000))


def test_uniform_single_argument_within_zero_and_max():
    g = Generator(11)
    assert all(0.0 <= g.uniform(4.0) <= 4.0 for _ in range(1000))


def test_uniform_equal_bounds():
    g = Generator(12)
    assert {g.uniform(0.5, 0.5) for _ in range(10)} == {0.5}


def test_global_functions_follow_seed():
    grandom.set_seed(11)
    globals_ints = [grandom.randint(0, 1000) for _ in range(10)]
    local = Generator(11)
    assert globals_ints == [local.randint(0, 1000) for _ in range(10)]


def test_global_uniform_follows_seed():
    grandom.set_seed(21)
    values = [grandom.uniform(1.0, 2.0) for _ in range(5)]
    local = Generator(21)
    assert values == [local.uniform(1.0, 2.0) for _ in range(5)]