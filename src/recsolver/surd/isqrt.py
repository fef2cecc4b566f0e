from __future__ import annotations

from typing import Optional


def integer_sqrt(m: int, start: int = 0, end: Optional[int] = None) -> Optional[int]:
    """
    Search [start, end] (both inclusive) for k with k*k == m.

    end defaults to m. Returns k, or None if m is not a perfect square
    within the range. A negative m gives an empty range with the default
    bounds and therefore None.
    """
    if end is None:
        end = m
    while start <= end:
        mid = (start + end) // 2
        sq = mid * mid
        if sq == m:
            return mid
        if sq > m:
            end = mid - 1
        else:
            start = mid + 1
    return None


def is_perfect_square(m: int) -> bool:
    return m >= 0 and integer_sqrt(m) is not None
