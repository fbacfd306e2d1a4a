"""
Runtime settings read from the environment (and a .env file, if present).

    WORDIFIER_LOG_LEVEL   Log level for the CLI and API entry points (default WARNING)
    WORDIFIER_MAX_BATCH   Max amounts per batch API request (default 100)
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_BATCH = 100


def load_env() -> None:
    """Load a .env file from the working directory into os.environ.

    Variables already set in the environment win over the file.
    """
    load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def log_level() -> str:
    level = os.getenv("WORDIFIER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else DEFAULT_LOG_LEVEL


def max_batch() -> int:
    return max(1, _env_int("WORDIFIER_MAX_BATCH", DEFAULT_MAX_BATCH))


def configure_logging() -> None:
    """Set up root logging for an entry point. Library code never calls this."""
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
