"""Tests for recsolver.surd.isqrt."""
from recsolver.surd.isqrt import integer_sqrt, is_perfect_square


def test_integer_sqrt_small_squares():
    for k in range(0, 50):
        assert integer_sqrt(k * k) == k


def test_integer_sqrt_non_squares():
    for m in (2, 3, 5, 8, 15, 17, 99, 1000):
        assert integer_sqrt(m) is None


def test_integer_sqrt_large():
    k = 123456789012345
    assert integer_sqrt(k * k) == k
    assert integer_sqrt(k * k + 1) is None


def test_integer_sqrt_empty_range():
    assert integer_sqrt(9, 4, 3) is None
    # negative argument collapses the default range
    assert integer_sqrt(-3, 0, -3) is None
    assert integer_sqrt(-4) is None


def test_integer_sqrt_bounded_range():
    assert integer_sqrt(49, 0, 10) == 7
    assert integer_sqrt(49, 0, 6) is None
    assert integer_sqrt(49, 8, 49) is None


def test_is_perfect_square():
    assert is_perfect_square(0) is True
    assert is_perfect_square(1) is True
    assert is_perfect_square(36) is True
    assert is_perfect_square(35) is False
    assert is_perfect_square(-1) is False
