from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from recsolver import config
from recsolver.surd.isqrt import integer_sqrt
from recsolver.surd.quadratic import QuadraticSurd


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootPair:
    """
    Roots of x^2 - r*x - s = 0.

    first:  root taken with +k (rational) or +sqrt(delta) (irrational)
    second: root taken with -k or -sqrt(delta)
    discriminant: delta = r^2 + 4s
    """

    first: QuadraticSurd
    second: QuadraticSurd
    discriminant: int

    @property
    def is_repeated(self) -> bool:
        return self.first == self.second

    @property
    def is_rational(self) -> bool:
        return self.first.is_rational() and self.second.is_rational()

    @property
    def is_complex(self) -> bool:
        return self.discriminant < 0

    def __iter__(self):
        yield self.first
        yield self.second


def characteristic_equation(r: int, s: int) -> Tuple[int, int, int]:
    """Coefficients (1, -r, -s) of x^2 - r*x - s."""
    return 1, -r, -s


def discriminant(r: int, s: int) -> int:
    return r * r + 4 * s


def characteristic_roots(r: int, s: int, *, complex_roots: Optional[str] = None) -> RootPair:
    """
    Roots of the characteristic equation of a(n) = r a(n-1) + s a(n-2).

    complex_roots overrides config.RECSOLVER_COMPLEX_ROOTS:
      "symbolic" keeps a negative discriminant under the root sign,
      "reject" raises ValueError for it.
    """
    policy = complex_roots if complex_roots is not None else config.RECSOLVER_COMPLEX_ROOTS
    if policy not in config.COMPLEX_ROOT_POLICIES:
        raise ValueError(f"unknown complex root policy {policy!r}")

    delta = discriminant(r, s)
    if delta < 0 and policy == "reject":
        raise ValueError(f"characteristic roots are complex (discriminant {delta})")

    k = integer_sqrt(delta, 0, delta)
    logger.debug("r=%d s=%d discriminant=%d sqrt=%s", r, s, delta, k)
    if k is None:
        return RootPair(
            QuadraticSurd(r, 1, delta, 2),
            QuadraticSurd(r, -1, delta, 2),
            delta,
        )
    return RootPair(
        QuadraticSurd(r + k, 0, 0, 2),
        QuadraticSurd(r - k, 0, 0, 2),
        delta,
    )
