from __future__ import annotations

import operator
from dataclasses import dataclass
from fractions import Fraction
from math import gcd
from typing import Union

from recsolver.errors import DivisionByZero, IncompatibleSurdKind
from .isqrt import integer_sqrt


SurdLike = Union["QuadraticSurd", int, Fraction]


@dataclass(frozen=True, eq=False)
class QuadraticSurd:
    """
    Exact number (a + b*sqrt(c)) / d with integer fields.

    Every instance is normalized on construction:
      d > 0,
      gcd(a, b, d) == 1,
      a perfect-square c is folded into a,
      b == 0 if and only if c == 0 (rationals carry no radicand).

    c is the "kind" of the surd. Arithmetic is defined between values of
    the same kind, and between a rational and anything. A negative c is
    kept symbolically, so sqrt(c) behaves like i*sqrt(-c).
    """

    a: int
    b: int = 0
    c: int = 0
    d: int = 1

    def __post_init__(self) -> None:
        a, b, c, d = (operator.index(v) for v in (self.a, self.b, self.c, self.d))
        if d == 0:
            raise DivisionByZero(f"zero denominator in ({a} + {b}*sqrt({c})) / 0")
        if d < 0:
            a, b, d = -a, -b, -d

        if c > 0:
            k = integer_sqrt(c)
            if k is not None:
                a, b, c = a + b * k, 0, 0
        if b == 0 or c == 0:
            b, c = 0, 0

        g = gcd(a, b, d)
        object.__setattr__(self, "a", a // g)
        object.__setattr__(self, "b", b // g)
        object.__setattr__(self, "c", c)
        object.__setattr__(self, "d", d // g)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_int(cls, a: int) -> "QuadraticSurd":
        """Lift an integer. Never fails."""
        return cls(a, 0, 0, 1)

    @classmethod
    def rational(cls, a: int, d: int) -> "QuadraticSurd":
        return cls(a, 0, 0, d)

    @classmethod
    def lift(cls, value: SurdLike) -> "QuadraticSurd":
        """Convert an int, Fraction or QuadraticSurd to a QuadraticSurd."""
        if isinstance(value, QuadraticSurd):
            return value
        if isinstance(value, Fraction):
            return cls.rational(value.numerator, value.denominator)
        if isinstance(value, int):
            return cls.from_int(value)
        raise TypeError(f"cannot lift {type(value).__name__} to QuadraticSurd")

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.a == 0 and self.b == 0

    def is_rational(self) -> bool:
        return self.c == 0

    def to_fraction(self) -> Fraction:
        if not self.is_rational():
            raise ValueError(f"{self} is not rational")
        return Fraction(self.a, self.d)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _join_kind(self, other: "QuadraticSurd") -> int:
        if self.c == 0:
            return other.c
        if other.c == 0 or other.c == self.c:
            return self.c
        raise IncompatibleSurdKind(self.c, other.c)

    def inverse(self) -> "QuadraticSurd":
        """1/(a + b*sqrt(c)) = (a - b*sqrt(c)) / (a^2 - b^2*c), scaled by d."""
        den = self.a * self.a - self.b * self.b * self.c
        if den == 0:
            raise DivisionByZero(f"inverse of zero ({self!r})")
        return QuadraticSurd(self.d * self.a, -self.d * self.b, self.c, den)

    def conjugate(self) -> "QuadraticSurd":
        return QuadraticSurd(self.a, -self.b, self.c, self.d)

    def __neg__(self) -> "QuadraticSurd":
        return QuadraticSurd(-self.a, -self.b, self.c, self.d)

    def __pos__(self) -> "QuadraticSurd":
        return self

    def __add__(self, other: SurdLike) -> "QuadraticSurd":
        try:
            y = QuadraticSurd.lift(other)
        except TypeError:
            return NotImplemented
        c = self._join_kind(y)
        return QuadraticSurd(
            self.a * y.d + y.a * self.d,
            self.b * y.d + y.b * self.d,
            c,
            self.d * y.d,
        )

    __radd__ = __add__

    def __sub__(self, other: SurdLike) -> "QuadraticSurd":
        try:
            y = QuadraticSurd.lift(other)
        except TypeError:
            return NotImplemented
        return self + (-y)

    def __rsub__(self, other: SurdLike) -> "QuadraticSurd":
        try:
            y = QuadraticSurd.lift(other)
        except TypeError:
            return NotImplemented
        return y + (-self)

    def __mul__(self, other: SurdLike) -> "QuadraticSurd":
        try:
            y = QuadraticSurd.lift(other)
        except TypeError:
            return NotImplemented
        c = self._join_kind(y)
        # (a + b√c)(a' + b'√c) = (aa' + bb'c) + (ab' + a'b)√c
        return QuadraticSurd(
            self.a * y.a + self.b * y.b * c,
            self.a * y.b + y.a * self.b,
            c,
            self.d * y.d,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: SurdLike) -> "QuadraticSurd":
        try:
            y = QuadraticSurd.lift(other)
        except TypeError:
            return NotImplemented
        return self * y.inverse()

    def __rtruediv__(self, other: SurdLike) -> "QuadraticSurd":
        try:
            y = QuadraticSurd.lift(other)
        except TypeError:
            return NotImplemented
        return y * self.inverse()

    def __pow__(self, n: int) -> "QuadraticSurd":
        if not isinstance(n, int):
            return NotImplemented
        if n < 0:
            return self.inverse() ** (-n)
        result = QuadraticSurd.from_int(1)
        base = self
        while n:
            if n & 1:
                result = result * base
            base = base * base
            n >>= 1
        return result

    # ------------------------------------------------------------------
    # Comparison / hashing
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (QuadraticSurd, int, Fraction)):
            return NotImplemented
        y = QuadraticSurd.lift(other)
        # Cross-multiplied so no common denominator is needed.
        return (
            self.c == y.c
            and self.a * y.d == y.a * self.d
            and self.b * y.d == y.b * self.d
        )

    def __hash__(self) -> int:
        if self.is_rational():
            # Agrees with hash(int) / hash(Fraction) for the same value.
            return hash(Fraction(self.a, self.d))
        return hash((self.a, self.b, self.c, self.d))

    def __str__(self) -> str:
        from recsolver.io.render import format_surd

        return format_surd(self)
