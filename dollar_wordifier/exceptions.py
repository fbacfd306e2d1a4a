"""
Exception types for amount wordification.

Every rejected input raises InvalidAmountError. The machine-readable code
tells callers (the API, the CLI) which rule the input broke.
"""

from __future__ import annotations

# ─── Error Codes ─────────────────────────────────────────────────────

NULL_INPUT = "NULL_INPUT"
TOO_MANY_DECIMALS = "TOO_MANY_DECIMALS"
DOLLARS_TOO_LONG = "DOLLARS_TOO_LONG"
CENTS_TOO_LONG = "CENTS_TOO_LONG"
INVALID_CHARACTER = "INVALID_CHARACTER"


class WordifyError(Exception):
    """Base exception for all wordification failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidAmountError(WordifyError, ValueError):
    """The input string is not a wordifiable dollar amount."""
