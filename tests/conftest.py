"""Pytest configuration.

Puts the repository root on ``sys.path`` so the :mod:`fibcalc` package can
be imported without installing it, and resets the range configuration that
individual tests tweak.
"""

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from fibcalc.config import Config  # noqa: E402


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Pin worker settings so results do not depend on the host."""
    monkeypatch.setattr(Config, "WORKERS", None)
    monkeypatch.setattr(Config, "SERIAL_THRESHOLD", 2048)
    yield
