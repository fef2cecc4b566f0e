from __future__ import annotations

from typing import List

import matplotlib.pyplot as plt
import numpy as np

from recsolver.solve.evaluate import closed_form_terms, iterate_terms
from recsolver.solve.recurrence import RecurrenceSpec, solve_nonhomogeneous


def recurrence_label(spec: RecurrenceSpec) -> str:
    return f"a(n) = {spec.r} a(n-1) + {spec.s} a(n-2) + {spec.t},  a(0)={spec.a0}, a(1)={spec.a1}"


def plot_terms(
    spec: RecurrenceSpec,
    count: int = 20,
    *,
    symlog: bool = False,
    complex_roots: str | None = None,
    save_path: str | None = None,
) -> List[int]:
    """
    Plot a(0..count-1) from direct iteration with the closed-form values
    overlaid as markers. Floats are only used for drawing.

    If save_path is set, saves a PNG there; otherwise shows the figure.
    Returns the iterated terms.
    """
    terms = iterate_terms(spec, count)
    solution = solve_nonhomogeneous(
        spec.r, spec.s, spec.t, spec.a0, spec.a1, complex_roots=complex_roots
    )
    closed = [x.to_fraction() for x in closed_form_terms(solution, count)]

    n = np.arange(count)
    y_iter = np.array([float(v) for v in terms])
    y_closed = np.array([float(v) for v in closed])

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(n, y_iter, "-", color="0.6", label="iteration")
    ax.plot(n, y_closed, "o", markersize=4, label="closed form")
    ax.set_xlabel("n")
    ax.set_ylabel("a(n)")
    ax.set_title(recurrence_label(spec))
    if symlog:
        ax.set_yscale("symlog")
    ax.legend()
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return terms
