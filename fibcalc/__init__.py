"""fibcalc - fast exact Fibonacci numbers, single values and parallel ranges."""

from .config import Config
from .core import Fib, fib
from .render import decimal

__version__ = Config.VERSION

__all__ = ["Fib", "fib", "decimal", "__version__"]
