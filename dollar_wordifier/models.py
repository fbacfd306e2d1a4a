"""
Pydantic models shared by the converter and its outer surfaces.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import WordifyError


class AmountParts(BaseModel):
    """A raw amount split at its decimal point.

    `dollars` has already had its separators (spaces, commas) removed.
    `cents` is None when the input had no decimal point, and is kept
    exactly as written otherwise.
    """

    model_config = ConfigDict(frozen=True)

    dollars: str
    cents: Optional[str] = None


class ErrorInfo(BaseModel):
    """Serializable form of a WordifyError."""

    code: str  # Machine-readable, e.g. "INVALID_CHARACTER"
    message: str
    details: dict = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: WordifyError) -> ErrorInfo:
        return cls(code=exc.code, message=exc.message, details=exc.details)


class WordifyResult(BaseModel):
    """Outcome of converting one amount. Exactly one of words/error is set."""

    amount: Optional[str] = None
    words: Optional[str] = None
    error: Optional[ErrorInfo] = None

    @model_validator(mode="after")
    def _words_xor_error(self) -> WordifyResult:
        if (self.words is None) == (self.error is None):
            raise ValueError("exactly one of words and error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
