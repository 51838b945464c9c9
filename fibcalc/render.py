"""Decimal rendering of Fibonacci values."""

import sys
from typing import Iterable, List

# CPython 3.11+ refuses to convert ints above 4300 digits to str by default.
# Fibonacci values pass that limit from F(20577) on.
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


def decimal(value: int) -> str:
    """Exact base-10 representation of ``value``."""
    return str(value)


def format_value(n: int, value: int) -> str:
    """Render one result as ``F(n) = value``."""
    return f"F({n}) = {decimal(value)}"


def format_range(start: int, values: Iterable[int]) -> List[str]:
    """Render consecutive results starting at index ``start``."""
    return [format_value(start + i, value) for i, value in enumerate(values)]
