#!/usr/bin/env python3
"""
Dollar Wordifier — Entry Point
==============================

Writes dollar amounts out in words.

Usage:
    python main.py                      # Demo table of sample amounts
    python main.py 1.50 "1,000" .01     # Wordify each argument
    WORDIFIER_LOG_LEVEL=DEBUG python main.py 123345
"""

from __future__ import annotations

import sys

from dollar_wordifier.config import configure_logging, load_env
from dollar_wordifier.models import WordifyResult
from dollar_wordifier.wordify import convert

# ─── Sample Amounts: a tour of the formatting rules ─────────────────

SAMPLE_AMOUNTS = [
    "0",
    "1",
    "21",
    "000123",
    "1,000",
    "123345",
    ".1",
    ".01",
    "1.50",
    "999999999999999.99",
    "5c",
    ".123",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Printers ────────────────────────────────────────────────────────


def print_result(result: WordifyResult) -> int:
    """Print one result: words to stdout, errors to stderr.

    Returns:
        0 if the amount converted, 1 if it was rejected.
    """
    if result.error is None:
        print(result.words)
        return 0
    print(f"{_RED}[{result.error.code}]{_RESET} {result.error.message}", file=sys.stderr)
    return 1


def print_demo() -> None:
    """Print every sample amount beside its words."""
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  DOLLAR WORDIFIER: SAMPLE AMOUNTS{_RESET}")
    print(f"{'=' * _WIDTH}")
    for amount in SAMPLE_AMOUNTS:
        result = convert(amount)
        print(f"  {_BOLD}{amount}{_RESET}")
        if result.error is None:
            print(f"    {_GREEN}{result.words}{_RESET}")
        else:
            print(f"    {_RED}[{result.error.code}]{_RESET} {_DIM}{result.error.message}{_RESET}")
    print(f"{'=' * _WIDTH}\n")


# ─── Main ────────────────────────────────────────────────────────────


def run(amounts: list[str]) -> int:
    """Wordify each amount in order. Returns the process exit code."""
    if not amounts:
        print_demo()
        return 0

    exit_code = 0
    for amount in amounts:
        exit_code |= print_result(convert(amount))
    return exit_code


def main():
    load_env()
    configure_logging()
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
