"""
FastAPI endpoint tests for the Dollar Wordifier API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _init_limits() -> None:
    """Set the batch limit once for all API tests (bypasses lifespan)."""
    api._max_batch = 3
    yield  # type: ignore[misc]
    api._max_batch = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"


class TestWordifyEndpoint:
    def test_wordify_amount(self) -> None:
        resp = client.post("/wordify", json={"amount": "1.50"})
        assert resp.status_code == 200
        assert resp.json() == {"amount": "1.50", "words": "ONE DOLLAR AND FIFTY CENTS"}

    def test_wordify_with_separators(self) -> None:
        data = client.post("/wordify", json={"amount": "123,345"}).json()
        assert data["words"] == (
            "ONE HUNDRED AND TWENTY-THREE THOUSAND, "
            "THREE HUNDRED AND FORTY-FIVE DOLLARS"
        )

    def test_query_string(self) -> None:
        resp = client.get("/wordify", params={"amount": ".01"})
        assert resp.status_code == 200
        assert resp.json()["words"] == "ZERO DOLLARS AND ONE CENT"

    def test_invalid_character_returns_400(self) -> None:
        resp = client.post("/wordify", json={"amount": "5c"})
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert detail["code"] == "INVALID_CHARACTER"
        assert detail["details"] == {"character": "c"}

    def test_cents_too_long_returns_400(self) -> None:
        resp = client.get("/wordify", params={"amount": ".123"})
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "CENTS_TOO_LONG"

    def test_null_amount_returns_400(self) -> None:
        resp = client.post("/wordify", json={"amount": None})
        assert resp.status_code == 400
        assert resp.json()["detail"]["code"] == "NULL_INPUT"

    def test_empty_amount_is_zero_dollars(self) -> None:
        resp = client.post("/wordify", json={"amount": ""})
        assert resp.status_code == 200
        assert resp.json() == {"amount": "", "words": "ZERO DOLLARS"}


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/wordify", json={})
        assert resp.status_code == 422

    def test_missing_body_returns_422(self) -> None:
        resp = client.post("/wordify")
        assert resp.status_code == 422

    def test_missing_query_returns_422(self) -> None:
        resp = client.get("/wordify")
        assert resp.status_code == 422


class TestBatchEndpoint:
    def test_mixed_batch(self) -> None:
        resp = client.post("/wordify/batch", json={"amounts": ["1", "5c", ".1"]})
        assert resp.status_code == 200
        data = resp.json()
        assert data["error_count"] == 1
        results = data["results"]
        assert results[0]["words"] == "ONE DOLLAR"
        assert results[1]["words"] is None
        assert results[1]["error"]["code"] == "INVALID_CHARACTER"
        assert results[2]["words"] == "ZERO DOLLARS AND TEN CENTS"

    def test_over_limit_returns_413(self) -> None:
        resp = client.post("/wordify/batch", json={"amounts": ["1", "2", "3", "4"]})
        assert resp.status_code == 413

    def test_empty_batch_returns_422(self) -> None:
        resp = client.post("/wordify/batch", json={"amounts": []})
        assert resp.status_code == 422
