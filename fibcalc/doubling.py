"""
Fast doubling for single Fibonacci numbers.

Based on the identities:
  F(2k)   = F(k) * [2*F(k+1) - F(k)]
  F(2k+1) = F(k)^2 + F(k+1)^2

Indices are plain Python ints, so there is no fixed ceiling on n; the only
limits are memory and time. F(n) has roughly 0.694 * n bits.
"""
from __future__ import annotations

from typing import Tuple

FibPair = Tuple[int, int]


def fib_pair(n: int) -> FibPair:
    """Return (F(n), F(n+1)) using fast doubling.

    Walks the bits of n from the most significant down, so the work is
    O(log n) big-integer multiplications and the call stack stays flat.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    a, b = 0, 1  # (F(0), F(1))
    for bit in bin(n)[2:]:
        c = a * ((b << 1) - a)  # F(2k)
        d = a * a + b * b       # F(2k+1)
        if bit == "1":
            a, b = d, c + d
        else:
            a, b = c, d
    return a, b


def single(n: int) -> int:
    """Return the nth Fibonacci number, F(0) = 0, F(1) = 1."""
    if n < 2:
        if n < 0:
            raise ValueError("n must be non-negative")
        return n
    return fib_pair(n)[0]
