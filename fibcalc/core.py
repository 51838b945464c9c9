"""Public entry points for computing Fibonacci numbers."""
from __future__ import annotations

from typing import List, Optional

from . import doubling, ranges


class Fib:
    """Static helpers for single Fibonacci numbers and ranges of them.

    ``single`` uses fast doubling, O(log n) multiplications. ``range`` seeds
    one chunk per worker with fast doubling and fills each chunk by addition,
    spreading chunks over a process pool.

    Both return exact Python ints and keep no state between calls.
    """

    @staticmethod
    def single(n: int) -> int:
        """Return F(n).

        >>> Fib.single(10)
        55
        """
        return doubling.single(n)

    @staticmethod
    def range(start: int, end: int, workers: Optional[int] = None) -> List[int]:
        """Return [F(start), ..., F(end)]; empty when end < start.

        ``workers`` only changes how the work is spread, never the result.

        >>> Fib.range(3, 10)
        [2, 3, 5, 8, 13, 21, 34, 55]
        """
        return ranges.fib_range(start, end, workers=workers)


def fib(n: int) -> int:
    """Shortcut for :meth:`Fib.single`."""
    return Fib.single(n)
