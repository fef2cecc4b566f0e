from .characteristic import RootPair, characteristic_equation, characteristic_roots, discriminant
from .recurrence import (
    DistinctRoots,
    HomogeneousSolution,
    NonhomogeneousSolution,
    ParticularSolution,
    RecurrenceSolution,
    RecurrenceSpec,
    RepeatedRoot,
    Resonance,
    combine_roots,
    detect_resonance,
    particular_solution,
    solve,
    solve_homogeneous,
    solve_nonhomogeneous,
)
from .evaluate import closed_form_terms, iterate_terms, verify_closed_form

__all__ = [
    "RootPair",
    "characteristic_equation",
    "characteristic_roots",
    "discriminant",
    "DistinctRoots",
    "HomogeneousSolution",
    "NonhomogeneousSolution",
    "ParticularSolution",
    "RecurrenceSolution",
    "RecurrenceSpec",
    "RepeatedRoot",
    "Resonance",
    "combine_roots",
    "detect_resonance",
    "particular_solution",
    "solve",
    "solve_homogeneous",
    "solve_nonhomogeneous",
    "closed_form_terms",
    "iterate_terms",
    "verify_closed_form",
]
