from __future__ import annotations

import logging
from typing import List, Optional, Union

from recsolver import config
from recsolver.surd.quadratic import QuadraticSurd
from .recurrence import (
    DistinctRoots,
    NonhomogeneousSolution,
    RecurrenceSpec,
    RepeatedRoot,
    solve_nonhomogeneous,
)


logger = logging.getLogger(__name__)

Solution = Union[DistinctRoots, RepeatedRoot, NonhomogeneousSolution]


def iterate_terms(spec: RecurrenceSpec, count: int) -> List[int]:
    """
    First `count` terms [a(0), ..., a(count-1)] by direct iteration.
    """
    if count < 0:
        raise ValueError("count must be non-negative.")
    terms = [spec.a0, spec.a1][:count]
    while len(terms) < count:
        terms.append(spec.r * terms[-1] + spec.s * terms[-2] + spec.t)
    return terms


def closed_form_terms(solution: Solution, count: int) -> List[QuadraticSurd]:
    """Evaluate a closed form exactly at n = 0..count-1."""
    if count < 0:
        raise ValueError("count must be non-negative.")
    return [solution.term(n) for n in range(count)]


def verify_closed_form(
    spec: RecurrenceSpec,
    count: Optional[int] = None,
    *,
    complex_roots: Optional[str] = None,
) -> List[int]:
    """
    Compare the closed form of the full recurrence against iteration.

    Returns the indices n where they disagree; an empty list means the
    first `count` terms (default config.RECSOLVER_VERIFY_TERMS) match.
    """
    if count is None:
        count = config.RECSOLVER_VERIFY_TERMS
    solution = solve_nonhomogeneous(
        spec.r, spec.s, spec.t, spec.a0, spec.a1, complex_roots=complex_roots
    )
    expected = iterate_terms(spec, count)
    got = closed_form_terms(solution, count)

    mismatches = [n for n, (e, g) in enumerate(zip(expected, got)) if g != e]
    if mismatches:
        logger.warning("closed form disagrees with iteration at n=%s for %s", mismatches, spec)
    else:
        logger.debug("closed form verified for n=0..%d", count - 1)
    return mismatches
