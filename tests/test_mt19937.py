import itertools

import pytest

from boggleht.mt19937 import MT19937


def test_first_output_default_seed():
    assert MT19937(5489)() == 3499211612


def test_ten_thousandth_output_default_seed():
    gen = MT19937(5489)
    value = None
    for _ in range(10000):
        value = gen()
    assert value == 4123659995


def test_default_seed_matches_5489():
    a = MT19937()
    b = MT19937(5489)
    assert [a() for _ in range(50)] == [b() for _ in range(50)]


def test_same_seed_is_deterministic():
    a = MT19937(42)
    b = MT19937(42)
    assert [a() for _ in range(1000)] == [b() for _ in range(1000)]


def test_different_seeds_differ():
    a = MT19937(1)
    b = MT19937(2)
    assert [a() for _ in range(10)] != [b() for _ in range(10)]


@pytest.mark.parametrize("seed", [0, 1, 12345, 2**31 - 1])
def test_outputs_are_32_bit(seed):
    gen = MT19937(seed)
    values = [gen() for _ in range(1300)]
    assert all(0 <= v < 2**32 for v in values)


def test_negative_seed_wraps_to_unsigned():
    a = MT19937(-1)
    b = MT19937(0xFFFFFFFF)
    assert [a() for _ in range(20)] == [b() for _ in range(20)]


def test_iteration_matches_calls():
    a = MT19937(7)
    b = MT19937(7)
    assert list(itertools.islice(a, 30)) == [b() for _ in range(30)]