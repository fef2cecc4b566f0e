"""
recsolver: exact closed forms for second-order linear recurrences
a(n) = r a(n-1) + s a(n-2) + t with integer coefficients, using
quadratic surds (a + b*sqrt(c)) / d instead of floating point.
"""

from .errors import DivisionByZero, IncompatibleSurdKind
from .surd.isqrt import integer_sqrt, is_perfect_square
from .surd.quadratic import QuadraticSurd
from .solve.characteristic import RootPair, characteristic_equation, characteristic_roots
from .solve.recurrence import (
    DistinctRoots,
    NonhomogeneousSolution,
    ParticularSolution,
    RecurrenceSolution,
    RecurrenceSpec,
    RepeatedRoot,
    Resonance,
    solve,
    solve_homogeneous,
    solve_nonhomogeneous,
)
from .solve.evaluate import closed_form_terms, iterate_terms, verify_closed_form
from .io.render import format_surd, render_report
from .viz.plot import plot_terms

__all__ = [
    # Errors
    "DivisionByZero",
    "IncompatibleSurdKind",
    # Surds
    "integer_sqrt",
    "is_perfect_square",
    "QuadraticSurd",
    # Characteristic equation
    "RootPair",
    "characteristic_equation",
    "characteristic_roots",
    # Solvers
    "DistinctRoots",
    "NonhomogeneousSolution",
    "ParticularSolution",
    "RecurrenceSolution",
    "RecurrenceSpec",
    "RepeatedRoot",
    "Resonance",
    "solve",
    "solve_homogeneous",
    "solve_nonhomogeneous",
    # Evaluation
    "closed_form_terms",
    "iterate_terms",
    "verify_closed_form",
    # Rendering
    "format_surd",
    "render_report",
    # Viz
    "plot_terms",
]
