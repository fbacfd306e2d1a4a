"""
Dollar Wordifier — FastAPI Server
================================

HTTP front end for writing dollar amounts out in words.

Endpoints:
    POST /wordify           Wordify one amount (JSON body)
    GET  /wordify?amount=   Wordify one amount (query string)
    POST /wordify/batch     Wordify many amounts; bad ones are reported inline
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from dollar_wordifier import __version__
from dollar_wordifier.config import configure_logging, load_env, max_batch
from dollar_wordifier.exceptions import InvalidAmountError
from dollar_wordifier.models import ErrorInfo, WordifyResult
from dollar_wordifier.wordify import convert, wordify

load_env()

logger = logging.getLogger(__name__)


# ─── Application Lifespan ────────────────────────────────────────────

_max_batch: int | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read the batch limit once on startup."""
    global _max_batch  # noqa: PLW0603
    _max_batch = max_batch()
    logger.info("Dollar Wordifier API ready (max batch %d)", _max_batch)
    yield
    _max_batch = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Dollar Wordifier API",
    description=(
        "Converts numeric dollar amounts such as `1,250.50` into cheque-style "
        "English words."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class WordifyRequest(BaseModel):
    """Request body for POST /wordify."""

    amount: Optional[str] = Field(
        ...,
        description="Digits with optional spaces/commas, then an optional '.' and up to two cents digits.",
        json_schema_extra={"example": "123,345.50"},
    )


class WordifyResponse(BaseModel):
    amount: str
    words: str

    model_config = {"json_schema_extra": {"example": {
        "amount": "123,345.50",
        "words": (
            "ONE HUNDRED AND TWENTY-THREE THOUSAND, "
            "THREE HUNDRED AND FORTY-FIVE DOLLARS AND FIFTY CENTS"
        ),
    }}}


class BatchRequest(BaseModel):
    """Request body for POST /wordify/batch."""

    amounts: list[Optional[str]] = Field(..., min_length=1)


class BatchResponse(BaseModel):
    results: list[WordifyResult]
    error_count: int


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_max_batch() -> int:
    if _max_batch is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return _max_batch


def _wordify_or_400(amount: str | None) -> WordifyResponse:
    try:
        words = wordify(amount)
    except InvalidAmountError as exc:
        logger.warning("Rejected amount %r: [%s] %s", amount, exc.code, exc)
        raise HTTPException(
            status_code=400,
            detail=ErrorInfo.from_exception(exc).model_dump(),
        ) from exc
    # wordify rejects None, so amount is a str here
    return WordifyResponse(amount=amount or "", words=words)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/wordify",
    summary="Write one amount out in words",
    tags=["Wordify"],
    responses={400: {"description": "Amount is malformed"}},
)
def wordify_amount(request: WordifyRequest) -> WordifyResponse:
    """Convert `amount` to words, e.g. `1.50` → `ONE DOLLAR AND FIFTY CENTS`."""
    logger.info("POST /wordify amount=%r", request.amount)
    return _wordify_or_400(request.amount)


@app.get(
    "/wordify",
    summary="Write one amount out in words (query string)",
    tags=["Wordify"],
    responses={400: {"description": "Amount is malformed"}},
)
def wordify_amount_query(amount: str = Query(..., description="Amount to convert")) -> WordifyResponse:
    logger.info("GET /wordify amount=%r", amount)
    return _wordify_or_400(amount)


@app.post(
    "/wordify/batch",
    summary="Write many amounts out in words",
    tags=["Wordify"],
    responses={
        413: {"description": "Too many amounts in one request"},
        503: {"description": "Service not yet initialised"},
    },
)
def wordify_batch(request: BatchRequest) -> BatchResponse:
    """Convert every amount. A malformed amount gets an `error` entry and
    does not stop the others."""
    limit = _get_max_batch()
    if len(request.amounts) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Too many amounts: {len(request.amounts)} (max {limit})",
        )

    logger.info("POST /wordify/batch count=%d", len(request.amounts))
    results = [convert(amount) for amount in request.amounts]
    return BatchResponse(
        results=results,
        error_count=sum(1 for r in results if not r.ok),
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__)


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(app)
