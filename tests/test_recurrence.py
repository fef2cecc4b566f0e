"""Tests for recsolver.solve.recurrence."""
from fractions import Fraction

import pytest

from recsolver.errors import DivisionByZero
from recsolver.solve.characteristic import characteristic_roots
from recsolver.solve.recurrence import (
    DistinctRoots,
    RecurrenceSpec,
    RepeatedRoot,
    Resonance,
    detect_resonance,
    particular_solution,
    solve,
    solve_homogeneous,
    solve_nonhomogeneous,
)
from recsolver.surd.quadratic import QuadraticSurd


# --- RecurrenceSpec ---

def test_spec_rejects_first_order():
    with pytest.raises(ValueError):
        RecurrenceSpec(1, 0, 0, 0, 1)


def test_spec_rejects_non_integers():
    with pytest.raises(ValueError):
        RecurrenceSpec(1.0, 1, 0, 0, 1)
    with pytest.raises(ValueError):
        RecurrenceSpec(1, 1, True, 0, 1)


def test_spec_is_homogeneous():
    assert RecurrenceSpec(1, 1, 0, 0, 1).is_homogeneous
    assert not RecurrenceSpec(1, 1, 2, 0, 1).is_homogeneous


# --- homogeneous ---

def test_fibonacci_binet():
    h = solve_homogeneous(1, 1, 0, 1)
    assert isinstance(h, DistinctRoots)
    assert h.x1 == QuadraticSurd(1, 1, 5, 2)
    assert h.x2 == QuadraticSurd(1, -1, 5, 2)
    # u = 1/sqrt(5) = sqrt(5)/5, v = -u
    assert h.u == QuadraticSurd(0, 1, 5, 5)
    assert h.v == QuadraticSurd(0, -1, 5, 5)
    assert [h.term(n) for n in range(8)] == [0, 1, 1, 2, 3, 5, 8, 13]


def test_repeated_root_identity_sequence():
    h = solve_homogeneous(2, -1, 0, 1)
    assert isinstance(h, RepeatedRoot)
    assert h.u == 0
    assert h.v == 1
    assert h.x == 1
    assert [h.term(n) for n in range(5)] == [0, 1, 2, 3, 4]


def test_repeated_root_powers():
    # a(n) = 4a(n-1) - 4a(n-2), a(0) = 1, a(1) = 6  ->  (2n + 1) 2^n
    h = solve_homogeneous(4, -4, 1, 6)
    assert isinstance(h, RepeatedRoot)
    assert h.u == 1
    assert h.v == 2
    assert h.x == 2


def test_distinct_rational_roots():
    # a(n) = 5a(n-1) - 6a(n-2), a(0) = 2, a(1) = 5  ->  3^n + 2^n
    h = solve_homogeneous(5, -6, 2, 5)
    assert isinstance(h, DistinctRoots)
    assert (h.x1, h.x2) == (QuadraticSurd(3), QuadraticSurd(2))
    assert (h.u, h.v) == (QuadraticSurd(1), QuadraticSurd(1))


def test_complex_roots_give_integer_terms():
    # a(n) = a(n-1) - a(n-2): period 6
    h = solve_homogeneous(1, -1, 0, 1)
    assert h.u == h.v.conjugate()
    assert [h.term(n) for n in range(7)] == [0, 1, 1, 0, -1, -1, 0]


def test_zero_s_divides_by_zero():
    # a repeated zero root cannot be fitted
    with pytest.raises(DivisionByZero):
        solve_homogeneous(0, 0, 1, 1)


# --- resonance ---

def test_detect_resonance():
    assert detect_resonance(characteristic_roots(1, 1)) is Resonance.NONE
    assert detect_resonance(characteristic_roots(3, -2)) is Resonance.SINGLE
    assert detect_resonance(characteristic_roots(2, -1)) is Resonance.DOUBLE


def test_particular_coefficients():
    assert particular_solution(1, 1, 1, Resonance.NONE).coefficient == -1
    assert particular_solution(3, -2, 4, Resonance.SINGLE).coefficient == -4
    p = particular_solution(2, -1, 1, Resonance.DOUBLE)
    assert p.coefficient == Fraction(1, 2)
    assert p.power == 2
    assert p.term(4) == 8


# --- nonhomogeneous ---

def test_double_resonance():
    sol = solve_nonhomogeneous(2, -1, 1, 0, 0)
    assert sol.particular.resonance is Resonance.DOUBLE
    assert sol.particular.coefficient == QuadraticSurd(1, 0, 0, 2)
    # a1' = a1 - C, a0' = a0
    assert isinstance(sol.homogeneous, RepeatedRoot)
    assert sol.homogeneous.u == 0
    assert sol.homogeneous.v == Fraction(-1, 2)
    # a(n) = n^2/2 - n/2
    assert [sol.term(n) for n in range(6)] == [0, 0, 1, 3, 6, 10]


def test_single_resonance():
    sol = solve_nonhomogeneous(3, -2, 4, 1, 1)
    assert sol.particular.resonance is Resonance.SINGLE
    assert sol.particular.coefficient == -4
    assert isinstance(sol.homogeneous, DistinctRoots)
    assert sol.homogeneous.x2 == 1
    # a(n) = 4 * 2^n - 3 - 4n
    assert sol.homogeneous.u == 4
    assert sol.homogeneous.v == -3
    assert [sol.term(n) for n in range(4)] == [1, 1, 5, 17]


def test_no_resonance_rational_roots():
    sol = solve_nonhomogeneous(5, -6, 2, 0, 0)
    assert sol.particular.resonance is Resonance.NONE
    assert sol.particular.coefficient == 1
    # a(n) = 3^n - 2 * 2^n + 1
    assert sol.homogeneous.u == 1
    assert sol.homogeneous.v == -2


def test_no_resonance_irrational_roots():
    sol = solve_nonhomogeneous(1, 1, 1, 0, 1)
    assert sol.particular.resonance is Resonance.NONE
    assert sol.particular.coefficient == -1
    assert [sol.term(n) for n in range(7)] == [0, 1, 2, 4, 7, 12, 20]


def test_zero_forcing_matches_homogeneous():
    sol = solve_nonhomogeneous(1, 1, 0, 0, 1)
    assert sol.particular.coefficient == 0
    assert sol.homogeneous == solve_homogeneous(1, 1, 0, 1)


# --- solve ---

def test_solve_bundles_both_solutions():
    spec = RecurrenceSpec(3, -2, 4, 1, 1)
    result = solve(spec)
    assert result.spec is spec
    assert result.roots.first == 2
    assert result.homogeneous == solve_homogeneous(3, -2, 1, 1)
    assert result.nonhomogeneous == solve_nonhomogeneous(3, -2, 4, 1, 1)


def test_solve_complex_rejected():
    with pytest.raises(ValueError):
        solve(RecurrenceSpec(1, -1, 0, 0, 1), complex_roots="reject")
