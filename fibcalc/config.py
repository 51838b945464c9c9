"""Configuration management for fibcalc."""

import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Malformed integer settings, reported by Config.validate()
_ENV_ERRORS = []


def _env_int(name: str, default):
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        _ENV_ERRORS.append(f"{name} must be an integer, got {value!r}")
        return default


class Config:
    """Configuration class for fibcalc."""

    # Range generation
    WORKERS = _env_int("FIB_WORKERS", None)
    SERIAL_THRESHOLD = _env_int("FIB_SERIAL_THRESHOLD", 2048)

    # HTTP endpoint
    HOST = os.getenv("FIB_HOST", "0.0.0.0")
    PORT = _env_int("PORT", 8080)

    # Application settings
    APP_NAME = "fibcalc"
    VERSION = "0.4.6"
    LOG_LEVEL = os.getenv("FIB_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

    # Benchmarks
    BENCH_MAX = _env_int("FIB_BENCH_MAX", 1_000_000)

    @classmethod
    def worker_count(cls) -> int:
        """Number of range workers, defaulting to the CPU count."""
        if cls.WORKERS is not None:
            return cls.WORKERS
        return os.cpu_count() or 1

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration."""
        if _ENV_ERRORS:
            raise ValueError("; ".join(_ENV_ERRORS))
        if cls.worker_count() < 1:
            raise ValueError("FIB_WORKERS must be at least 1")
        if cls.SERIAL_THRESHOLD < 0:
            raise ValueError("FIB_SERIAL_THRESHOLD must not be negative")
        if not 0 < cls.PORT < 65536:
            raise ValueError(f"PORT out of range: {cls.PORT}")
        return True


def configure_logging(level: str = None) -> None:
    """Set up root logging for the command-line entry points."""
    logging.basicConfig(
        level=level or Config.LOG_LEVEL,
        format=Config.LOG_FORMAT,
        datefmt=Config.LOG_DATEFMT,
    )
