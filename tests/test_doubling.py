"""Tests for :mod:`fibcalc.doubling`."""

import pytest

from fibcalc.doubling import fib_pair, single


F187 = 538522340430300790495419781092981030533
F256 = 141693817714056513234709965875411919657707794958199867


def _linear(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def test_base_cases():
    assert single(0) == 0
    assert single(1) == 1


def test_known_values():
    assert single(10) == 55
    assert single(20) == 6765
    # beyond 128-bit output
    assert single(187) == F187
    # beyond 8-bit input
    assert single(256) == F256


def test_largest_128_bit_value():
    assert single(186) == 332825110087067562321196029789634457848
    assert single(186) < 2 ** 128 < single(187)


def test_recurrence():
    for n in range(2, 1000):
        assert single(n) == single(n - 1) + single(n - 2)


def test_matches_linear_iteration():
    for n in list(range(0, 300)) + [511, 512, 513, 1023, 1024, 4097]:
        assert single(n) == _linear(n)


def test_pair_is_consecutive():
    assert fib_pair(0) == (0, 1)
    assert fib_pair(1) == (1, 1)
    for n in (2, 3, 50, 99, 100, 777):
        assert fib_pair(n) == (_linear(n), _linear(n + 1))


def test_large_index_identity():
    # F(2k) = F(k) * (F(k-1) + F(k+1))
    k = 50_000
    assert single(2 * k) == single(k) * (single(k - 1) + single(k + 1))


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        single(-1)
    with pytest.raises(ValueError):
        fib_pair(-5)
