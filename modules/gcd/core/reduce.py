from __future__ import annotations

from typing import Iterable


def gcd(a: int, b: int) -> int:
    assert a != 0 and b != 0

    n, m = a, b
    while m != 0:
        if m < n:
            n, m = m, n
        m = m % n
    return n


def reduce_gcd(values: Iterable[int]) -> int | None:
    """Fold ``values`` left to right; ``None`` when nothing was folded."""
    result: int | None = None
    for value in values:
        if result is None:
            result = value
        else:
            result = gcd(result, value)
    return result
