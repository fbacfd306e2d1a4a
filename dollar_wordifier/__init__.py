"""
Dollar Wordifier — write dollar amounts out in words, the way a cheque does.

Pipeline: Validate → Segment → Wordify → Format
Entry point: wordify("1,250.50") → "ONE THOUSAND, TWO HUNDRED AND FIFTY DOLLARS AND FIFTY CENTS"
"""

from .exceptions import InvalidAmountError, WordifyError
from .wordify import convert, wordify

__version__ = "1.0.0"

__all__ = ["InvalidAmountError", "WordifyError", "convert", "wordify", "__version__"]
