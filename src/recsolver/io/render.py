from __future__ import annotations

from typing import List

from recsolver.surd.quadratic import QuadraticSurd
from recsolver.solve.characteristic import RootPair
from recsolver.solve.recurrence import (
    DistinctRoots,
    HomogeneousSolution,
    ParticularSolution,
    RecurrenceSolution,
    Resonance,
)


INDENT = "    "


def format_surd(x: QuadraticSurd) -> str:
    """
    Canonical text of (a + b*sqrt(c)) / d, e.g.

      3, -1 / 2, sqrt(5) / 5, -2 sqrt(3), (1 - sqrt(5)) / 2
    """
    a, b, c, d = x.a, x.b, x.c, x.d
    irrational = b != 0 and c != 0

    if a != 0:
        body = str(a)
        if irrational:
            sign = " + " if b > 0 else " - "
            coeff = "" if abs(b) == 1 else f"{abs(b)} "
            body = f"({a}{sign}{coeff}sqrt({c}))"
    elif irrational:
        if b == 1:
            coeff = ""
        elif b == -1:
            coeff = "-"
        else:
            coeff = f"{b} "
        body = f"{coeff}sqrt({c})"
    else:
        body = "0"

    if d != 1:
        body += f" / {d}"
    return body


def format_characteristic_equation(r: int, s: int) -> str:
    return f"x^2 + ({-r})x + ({-s}) = 0"


def format_homogeneous(h: HomogeneousSolution) -> str:
    if isinstance(h, DistinctRoots):
        return f"[{format_surd(h.u)}] [{format_surd(h.x1)}]^n + [{format_surd(h.v)}] [{format_surd(h.x2)}]^n"
    return f"[({format_surd(h.v)})n + ({format_surd(h.u)})] [{format_surd(h.x)}]^n"


def format_particular(p: ParticularSolution) -> str:
    c = format_surd(p.coefficient)
    if p.resonance is Resonance.NONE:
        return c
    if p.resonance is Resonance.SINGLE:
        return f"[{c}] n"
    return f"[{c}] n^2"


def _root_lines(r: int, s: int, roots: RootPair) -> List[str]:
    return [
        f"{INDENT}Characteristic equation: {format_characteristic_equation(r, s)}",
        f"{INDENT}Root 1 = {format_surd(roots.first)}",
        f"{INDENT}Root 2 = {format_surd(roots.second)}",
    ]


def render_report(solution: RecurrenceSolution) -> str:
    """
    Text report with a section for the homogeneous recurrence (t dropped)
    and one for the full recurrence.
    """
    spec = solution.spec
    full = solution.nonhomogeneous

    lines = ["", "+++ Solving the homogeneous recurrence"]
    lines += _root_lines(spec.r, spec.s, solution.roots)
    lines.append(f"{INDENT}Homogeneous solution :")
    lines.append(INDENT + format_homogeneous(solution.homogeneous))

    lines += ["", "+++ Solving the nonhomogeneous recurrence"]
    lines += _root_lines(spec.r, spec.s, full.roots)
    lines.append(f"{INDENT}Particular solution : {format_particular(full.particular)}")
    lines.append(f"{INDENT}Homogeneous solution :")
    lines.append(INDENT + format_homogeneous(full.homogeneous))
    return "\n".join(lines) + "\n"
