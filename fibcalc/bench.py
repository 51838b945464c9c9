"""Timing harness for the Fibonacci engine."""

import time
from typing import Callable, List, Tuple

from rich.console import Console
from rich.table import Table

from .core import Fib

# 186: largest index whose value fits in u128 (187 is the first to overflow),
# 185 one below it, 255: largest u8 index; then powers of ten.
SINGLE_CASES = [185, 186, 255, 1_000, 10_000, 100_000, 1_000_000, 10_000_000]
RANGE_CASE = (1_000, 10_999)


def _time(func: Callable[[], object], repeat: int) -> float:
    """Best wall time in seconds over ``repeat`` runs."""
    best = float("inf")
    for _ in range(max(1, repeat)):
        started = time.perf_counter()
        func()
        best = min(best, time.perf_counter() - started)
    return best


def run_benchmarks(max_index: int, repeat: int = 3, workers: int = None) -> List[Tuple[str, float]]:
    """Time ``Fib.single`` for the standard cases up to ``max_index`` and one range."""
    results = []
    for n in SINGLE_CASES:
        if n > max_index:
            break
        results.append((f"single({n:,})", _time(lambda: Fib.single(n), repeat)))

    start, end = RANGE_CASE
    if end <= max_index:
        results.append(
            (f"range({start:,}, {end:,})", _time(lambda: Fib.range(start, end, workers), repeat))
        )
    return results


def render(results: List[Tuple[str, float]], console: Console = None) -> None:
    table = Table(title="fibcalc benchmarks")
    table.add_column("case")
    table.add_column("best time", justify="right")
    for name, seconds in results:
        if seconds < 1e-3:
            shown = f"{seconds * 1e6:.1f} µs"
        elif seconds < 1:
            shown = f"{seconds * 1e3:.2f} ms"
        else:
            shown = f"{seconds:.2f} s"
        table.add_row(name, shown)
    (console or Console()).print(table)
