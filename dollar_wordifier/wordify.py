"""
Convert a numeric dollar amount into its English words, cheque style.

    "123345"      → "ONE HUNDRED AND TWENTY-THREE THOUSAND, THREE HUNDRED AND FORTY-FIVE DOLLARS"
    "1,000.5"     → "ONE THOUSAND DOLLARS AND FIFTY CENTS"
    ".01"         → "ZERO DOLLARS AND ONE CENT"

Flow:
    split_amount()      validate and normalize the raw string
    generate_segments() group digits in threes from the right
    wordify_segment()   0-999 → words
    wordify_dollars()   join segments with THOUSAND/MILLION/... and commas
    wordify_cents()     " AND <words> CENT(S)"

Spaces and commas are accepted as thousands separators in the dollar part
only. A single cents digit is read as tens: ".1" is TEN CENTS, not ONE.
"""

from __future__ import annotations

import logging

from .exceptions import (
    CENTS_TOO_LONG,
    DOLLARS_TOO_LONG,
    INVALID_CHARACTER,
    NULL_INPUT,
    TOO_MANY_DECIMALS,
    InvalidAmountError,
)
from .models import AmountParts, ErrorInfo, WordifyResult

logger = logging.getLogger(__name__)

# ─── Limits ──────────────────────────────────────────────────────────

# Five segments of three digits: hundreds of trillions.
DOLLARS_MAX_LEN = 15
CENTS_MAX_LEN = 2

_DECIMAL_POINT = "."
_SEPARATORS: tuple[str, ...] = (" ", ",")
_DIGITS = "0123456789"

# ─── Word Lookup Tables ──────────────────────────────────────────────

# Indexed by digit value. Also used for the hundreds digit.
_ONES: tuple[str, ...] = (
    "", "ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN", "EIGHT", "NINE",
)

# Indexed by the ones digit when the tens digit is 1.
_TEENS: tuple[str, ...] = (
    "TEN", "ELEVEN", "TWELVE", "THIRTEEN", "FOURTEEN",
    "FIFTEEN", "SIXTEEN", "SEVENTEEN", "EIGHTEEN", "NINETEEN",
)

_TENS: tuple[str, ...] = (
    "", "TEN", "TWENTY", "THIRTY", "FORTY",
    "FIFTY", "SIXTY", "SEVENTY", "EIGHTY", "NINETY",
)

# Indexed by segment position, counting from the least-significant segment.
_SUFFIXES: tuple[str, ...] = ("", " THOUSAND", " MILLION", " BILLION", " TRILLION")


# ─── Public API ──────────────────────────────────────────────────────


def wordify(number: str | None) -> str:
    """Generate the cheque-style word representation of a dollar amount.

    Args:
        number: Digits with optional spaces/commas, optionally followed by
            a single "." and up to two cents digits. e.g. "1,250.5"

    Returns:
        e.g. "ONE THOUSAND, TWO HUNDRED AND FIFTY DOLLARS AND FIFTY CENTS"

    Raises:
        InvalidAmountError: If the input is None or malformed. Raised before
            any words are generated.
    """
    parts = split_amount(number)

    words = wordify_dollars(parts.dollars)
    if parts.cents is not None:
        words += wordify_cents(parts.cents)
    return words


def convert(amount: str | None) -> WordifyResult:
    """Wordify one amount, reporting a rejected input instead of raising.

    Used where one bad amount must not abort the rest (batch API, CLI).
    """
    try:
        words = wordify(amount)
    except InvalidAmountError as exc:
        logger.debug("Rejected amount %r: [%s] %s", amount, exc.code, exc)
        return WordifyResult(amount=amount, error=ErrorInfo.from_exception(exc))
    return WordifyResult(amount=amount, words=words)


def split_amount(number: str | None) -> AmountParts:
    """Split a raw amount into separator-free dollars and raw cents.

    Every validation rule is applied here so that callers see the failure
    before any conversion starts.

    Raises:
        InvalidAmountError: On None, extra decimal points, over-long parts,
            or non-digit characters.
    """
    if number is None:
        raise InvalidAmountError(NULL_INPUT, "Invalid input: input cannot be null.")

    pieces = number.split(_DECIMAL_POINT)
    if len(pieces) > 2:
        raise InvalidAmountError(
            TOO_MANY_DECIMALS,
            "Invalid input: input must contain one or less decimals.",
            {"decimal_count": len(pieces) - 1},
        )

    dollars = strip_separators(pieces[0])
    _check_length(dollars, DOLLARS_MAX_LEN, DOLLARS_TOO_LONG, "dollar")
    _check_digits(dollars)

    cents: str | None = None
    if len(pieces) > 1:
        cents = pieces[1]
        _check_length(cents, CENTS_MAX_LEN, CENTS_TOO_LONG, "cents")
        _check_digits(cents)

    logger.debug("Split %r into dollars=%r cents=%r", number, dollars, cents)
    return AmountParts(dollars=dollars, cents=cents)


def strip_separators(dollars: str) -> str:
    """Remove thousands separators. Digit order is untouched."""
    for separator in _SEPARATORS:
        dollars = dollars.replace(separator, "")
    return dollars


# ─── Dollars & Cents ─────────────────────────────────────────────────


def wordify_dollars(dollars: str) -> str:
    """Words for the dollar part: at most 15 digits, no separators.

    Zero segments are skipped entirely, so "1000000" is just
    "ONE MILLION DOLLARS". An empty or all-zero string is "ZERO DOLLARS".
    """
    _check_length(dollars, DOLLARS_MAX_LEN, DOLLARS_TOO_LONG, "dollar")

    # Least-significant segment first, so the index matches _SUFFIXES.
    segment_words = [wordify_segment(s) for s in reversed(generate_segments(dollars))]
    spoken = [position for position, words in enumerate(segment_words) if words]
    logger.debug("Dollars %r: %d segment(s), %d non-zero", dollars, len(segment_words), len(spoken))

    if not spoken:
        return "ZERO DOLLARS"

    # Singular only for a lone segment reading ONE; "0001" has two segments.
    if len(segment_words) == 1 and segment_words[0] == "ONE":
        words = "DOLLAR"
    else:
        words = "DOLLARS"

    # Prepend each segment; only the first one sits directly on the unit word.
    separator = " "
    for position in spoken:
        words = f"{segment_words[position]}{_SUFFIXES[position]}{separator}{words}"
        separator = ", "
    return words


def wordify_cents(cents: str) -> str:
    """Words for the cents part, including the leading " AND ".

    Fewer than two digits are right-padded with zeros: "" → "00" and
    "5" → "50".
    """
    _check_length(cents, CENTS_MAX_LEN, CENTS_TOO_LONG, "cents")
    cents = cents.ljust(CENTS_MAX_LEN, "0")

    words = wordify_segment(generate_segments(cents)[0]) or "ZERO"
    unit = "CENT" if words == "ONE" else "CENTS"
    return f" AND {words} {unit}"


# ─── Segments ────────────────────────────────────────────────────────


def generate_segments(digits: str) -> list[tuple[int, ...]]:
    """Group a digit string into threes, counting from the right.

    Returns the segments most-significant first; only the first may be
    shorter than three digits. "1234567" → [(1,), (2, 3, 4), (5, 6, 7)]

    Raises:
        InvalidAmountError: On the first non-digit character.
    """
    values = [_digit_value(char) for char in digits]

    segments: list[tuple[int, ...]] = []
    end = len(values)
    while end > 0:
        start = max(end - 3, 0)
        segments.append(tuple(values[start:end]))
        end = start

    segments.reverse()
    return segments


def wordify_segment(segment: tuple[int, ...]) -> str:
    """Words for one segment of 1-3 digits, most-significant first.

    An all-zero segment gives "" so the caller can decide whether to
    say ZERO.
    """
    if not 1 <= len(segment) <= 3:
        raise ValueError(f"Segment must have 1-3 digits, got {len(segment)}")

    hundreds, tens, ones = (0,) * (3 - len(segment)) + tuple(segment)

    if tens == 1:
        rest = _TEENS[ones]
    elif tens and ones:
        rest = f"{_TENS[tens]}-{_ONES[ones]}"
    else:
        rest = _TENS[tens] or _ONES[ones]

    if not hundreds:
        return rest
    if not rest:
        return f"{_ONES[hundreds]} HUNDRED"
    return f"{_ONES[hundreds]} HUNDRED AND {rest}"


# ─── Validation Helpers ──────────────────────────────────────────────


def _digit_value(char: str) -> int:
    if char not in _DIGITS:
        raise InvalidAmountError(
            INVALID_CHARACTER,
            f'Invalid input: character "{char}" is not valid. '
            f"Use only numbers, decimals, spaces, and commas.",
            {"character": char},
        )
    return _DIGITS.index(char)


def _check_digits(part: str) -> None:
    for char in part:
        _digit_value(char)


def _check_length(part: str, limit: int, code: str, label: str) -> None:
    if len(part) > limit:
        raise InvalidAmountError(
            code,
            f"Invalid input: {label} part must be at most {limit} digits long.",
            {"length": len(part), "max_length": limit},
        )
