from .isqrt import integer_sqrt, is_perfect_square
from .quadratic import QuadraticSurd

__all__ = [
    "integer_sqrt",
    "is_perfect_square",
    "QuadraticSurd",
]
