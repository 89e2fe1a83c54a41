"""Tests for the birthday-paradox collision estimate."""

from decimal import Decimal
import math

import pytest

from genpass.collision import collision_seconds, collision_seconds_from_length

# 2 * ln(1 / 0.99) bracketed by 17-decimal truncations
_TWO_LN_LOW = 2010067170700288
_TWO_LN_HIGH = 2010067170700289
_SCALE = 10**17


def _assert_ceil_root(n, m):
    # n = ceil(sqrt(2 * m * ln(1/0.99))), checked with exact integers
    assert n * n * _SCALE >= m * _TWO_LN_LOW
    assert (n - 1) * (n - 1) * _SCALE < m * _TWO_LN_HIGH


def test_single_digit_space():
    assert collision_seconds_from_length(10, 1) == 1
    assert collision_seconds(10) == math.ceil(math.sqrt(2 * 10 * math.log(100 / 99)))


def test_lowercase_length_eight():
    assert collision_seconds_from_length(26, 8) == 64789
    _assert_ceil_root(64789, 26**8)


def test_one_possible_password():
    assert collision_seconds(1) == 1
    assert collision_seconds_from_length(26, 0) == 1


def test_result_is_rounded_up():
    m = 10**12
    exact = math.sqrt(2 * m * math.log(1 / 0.99))
    assert collision_seconds(m) == math.ceil(exact)
    assert collision_seconds(m) > exact


@pytest.mark.parametrize(
    "size, length",
    [(95, 64), (94, 64), (73, 128), (10, 600), (2, 2000)],
)
def test_huge_spaces_stay_exact(size, length):
    m = size**length
    n = collision_seconds_from_length(size, length)
    assert isinstance(n, int)
    _assert_ceil_root(n, m)


def test_monotonic_in_space_size():
    spaces = [1, 2, 3, 10, 99, 100, 10**6, 26**8, 10**20, 95**16, 95**64, 10**600]
    results = [collision_seconds(m) for m in spaces]
    assert results == sorted(results)


def test_monotonic_for_neighbouring_spaces():
    for m in range(1, 2000):
        assert collision_seconds(m) <= collision_seconds(m + 1)


def test_other_probability():
    # half-chance estimate is larger than the 1% one
    m = 26**8
    assert collision_seconds(m, "0.5") > collision_seconds(m)
    assert collision_seconds(m, 0.01) == collision_seconds(m, Decimal("0.01"))


@pytest.mark.parametrize("p", [0, 1, -0.5, 1.5])
def test_probability_out_of_range(p):
    with pytest.raises(ValueError):
        collision_seconds(100, p)


def test_zero_space_is_rejected():
    with pytest.raises(ValueError):
        collision_seconds(0)
    with pytest.raises(ValueError):
        collision_seconds_from_length(0, 8)


def test_negative_inputs_are_rejected():
    with pytest.raises(ValueError):
        collision_seconds(-5)
    with pytest.raises(ValueError):
        collision_seconds_from_length(10, -1)


def test_non_int_space_is_rejected():
    with pytest.raises(TypeError):
        collision_seconds(1e10)
    with pytest.raises(TypeError):
        collision_seconds(True)
