from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from recsolver.surd.quadratic import QuadraticSurd, SurdLike
from .characteristic import RootPair, characteristic_roots


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecurrenceSpec:
    """
    a(n) = r a(n-1) + s a(n-2) + t  with a(0) = a0, a(1) = a1.
    """

    r: int
    s: int
    t: int
    a0: int
    a1: int

    def __post_init__(self) -> None:
        for name in ("r", "s", "t", "a0", "a1"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.s == 0:
            raise ValueError("s must be nonzero (first-order recurrences are not supported)")

    @property
    def is_homogeneous(self) -> bool:
        return self.t == 0


# ---------------------------------------------------------------------------
# Homogeneous solution shapes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DistinctRoots:
    """a(n) = u * x1^n + v * x2^n"""

    u: QuadraticSurd
    v: QuadraticSurd
    x1: QuadraticSurd
    x2: QuadraticSurd

    def term(self, n: int) -> QuadraticSurd:
        return self.u * self.x1 ** n + self.v * self.x2 ** n


@dataclass(frozen=True)
class RepeatedRoot:
    """a(n) = (v * n + u) * x^n"""

    u: QuadraticSurd
    v: QuadraticSurd
    x: QuadraticSurd

    def term(self, n: int) -> QuadraticSurd:
        return (self.v * n + self.u) * self.x ** n


HomogeneousSolution = Union[DistinctRoots, RepeatedRoot]


# ---------------------------------------------------------------------------
# Particular solution
# ---------------------------------------------------------------------------

class Resonance(Enum):
    """How many characteristic roots equal 1. The value is the power of n
    multiplying the particular coefficient."""

    NONE = 0
    SINGLE = 1
    DOUBLE = 2


@dataclass(frozen=True)
class ParticularSolution:
    """C * n^power, power given by the resonance."""

    resonance: Resonance
    coefficient: QuadraticSurd

    @property
    def power(self) -> int:
        return self.resonance.value

    def term(self, n: int) -> QuadraticSurd:
        return self.coefficient * n ** self.power


@dataclass(frozen=True)
class NonhomogeneousSolution:
    particular: ParticularSolution
    homogeneous: HomogeneousSolution
    roots: RootPair

    def term(self, n: int) -> QuadraticSurd:
        return self.particular.term(n) + self.homogeneous.term(n)


@dataclass(frozen=True)
class RecurrenceSolution:
    """
    Both solutions the command line reports for one recurrence:
    the homogeneous recurrence (t dropped) and the full one.
    """

    spec: RecurrenceSpec
    roots: RootPair
    homogeneous: HomogeneousSolution
    nonhomogeneous: NonhomogeneousSolution


# ---------------------------------------------------------------------------
# Solvers
# ---------------------------------------------------------------------------

def combine_roots(roots: RootPair, a0: SurdLike, a1: SurdLike) -> HomogeneousSolution:
    """
    Fit the homogeneous solution to the initial terms a0, a1.

    Distinct roots solve u + v = a0, u*x1 + v*x2 = a1.
    A repeated root x solves u = a0, (v + u)*x = a1 (x != 0 since s != 0).
    """
    x1, x2 = roots.first, roots.second
    a0 = QuadraticSurd.lift(a0)
    a1 = QuadraticSurd.lift(a1)

    if x1 != x2:
        u = (x2 * a0 - a1) / (x2 - x1)
        v = (x1 * a0 - a1) / (x1 - x2)
        logger.debug("distinct roots %s, %s: u=%s v=%s", x1, x2, u, v)
        return DistinctRoots(u=u, v=v, x1=x1, x2=x2)

    u = a0
    v = a1 / x1 - u
    logger.debug("repeated root %s: u=%s v=%s", x1, u, v)
    return RepeatedRoot(u=u, v=v, x=x1)


def solve_homogeneous(
    r: int,
    s: int,
    a0: int,
    a1: int,
    *,
    complex_roots: Optional[str] = None,
) -> HomogeneousSolution:
    """Closed form of a(n) = r a(n-1) + s a(n-2)."""
    roots = characteristic_roots(r, s, complex_roots=complex_roots)
    return combine_roots(roots, a0, a1)


def detect_resonance(roots: RootPair) -> Resonance:
    one = QuadraticSurd.from_int(1)
    first, second = roots.first == one, roots.second == one
    if first and second:
        return Resonance.DOUBLE
    if first or second:
        return Resonance.SINGLE
    return Resonance.NONE


def particular_solution(r: int, s: int, t: int, resonance: Resonance) -> ParticularSolution:
    """
    Coefficient C of the trial solution C * n^k for the constant forcing t.

    NONE:   C = t / (1 - r - s)
    SINGLE: C = t / (r + 2s)
    DOUBLE: C = -t / (r + 4s)
    """
    if resonance is Resonance.NONE:
        c = QuadraticSurd.rational(t, 1 - r - s)
    elif resonance is Resonance.DOUBLE:
        c = QuadraticSurd.rational(-t, r + 4 * s)
    else:
        c = QuadraticSurd.rational(t, r + 2 * s)
    return ParticularSolution(resonance=resonance, coefficient=c)


def solve_nonhomogeneous(
    r: int,
    s: int,
    t: int,
    a0: int,
    a1: int,
    *,
    complex_roots: Optional[str] = None,
) -> NonhomogeneousSolution:
    """
    Closed form of a(n) = r a(n-1) + s a(n-2) + t as particular + homogeneous.

    The particular term is subtracted from the initial values before the
    homogeneous coefficients are fitted.
    """
    roots = characteristic_roots(r, s, complex_roots=complex_roots)
    resonance = detect_resonance(roots)
    particular = particular_solution(r, s, t, resonance)
    logger.debug("resonance=%s particular coefficient=%s", resonance.name, particular.coefficient)

    C = particular.coefficient
    a0_adj = QuadraticSurd.from_int(a0)
    a1_adj = QuadraticSurd.from_int(a1) - C
    if resonance is Resonance.NONE:
        a0_adj = a0_adj - C

    homogeneous = combine_roots(roots, a0_adj, a1_adj)
    return NonhomogeneousSolution(particular=particular, homogeneous=homogeneous, roots=roots)


def solve(spec: RecurrenceSpec, *, complex_roots: Optional[str] = None) -> RecurrenceSolution:
    """Solve both the homogeneous and the full recurrence described by spec."""
    roots = characteristic_roots(spec.r, spec.s, complex_roots=complex_roots)
    homogeneous = combine_roots(roots, spec.a0, spec.a1)
    nonhomogeneous = solve_nonhomogeneous(
        spec.r, spec.s, spec.t, spec.a0, spec.a1, complex_roots=complex_roots
    )
    return RecurrenceSolution(
        spec=spec,
        roots=roots,
        homogeneous=homogeneous,
        nonhomogeneous=nonhomogeneous,
    )
