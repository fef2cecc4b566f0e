from __future__ import annotations


class DivisionByZero(ZeroDivisionError):
    """A surd construction or inversion needed a zero denominator."""


class IncompatibleSurdKind(ValueError):
    """
    Arithmetic between two surds with different nonzero radicands,
    e.g. sqrt(2) + sqrt(3).

    The solver only ever combines surds derived from one discriminant,
    so seeing this means a bug in the caller rather than bad input.
    """

    def __init__(self, c1: int, c2: int):
        super().__init__(f"cannot combine sqrt({c1}) with sqrt({c2})")
        self.c1 = c1
        self.c2 = c2
