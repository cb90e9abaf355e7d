"""Tests of the Web API."""

from collections.abc import Iterator
from datetime import timedelta

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from lexidetect.api.rate_limiter import RateLimiter
from lexidetect.api.router import create_app
from tests.samples import AI_TEXT, GPT_TEXT


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a client of the API with a generous rate limit."""
    app = create_app(RateLimiter(max_request_per_interval=100))
    with TestClient(app) as client:
        yield client


class TestRoutes:
    """Tests of the API endpoints."""

    def test_healthcheck(self, client: TestClient) -> None:
        response = client.get("/v1/healthcheck")
        assert response.status_code == 200
        assert response.json() == {"is_healthy": True}

    def test_analyse(self, client: TestClient) -> None:
        response = client.post("/v1/analyse", json={"text": GPT_TEXT})
        assert response.status_code == 200

        body = response.json()
        assert body["result"]["likelyModel"] == "GPT"
        assert 0 <= body["result"]["aiConfidence"] <= 100
        assert body["result"]["criticalSections"]
        section = body["result"]["criticalSections"][0]
        assert GPT_TEXT[section["start"] : section["end"]] == section["text"]
        assert body["verdict"] in {"likely_ai", "mixed", "likely_human"}
        assert body["label"]
        assert body["wordCount"] > 50
        assert isinstance(body["remarks"], list)

    def test_too_short_text(self, client: TestClient) -> None:
        response = client.post("/v1/analyse", json={"text": "Far too short."})
        assert response.status_code == 422
        assert "minimum 50 words" in response.json()["detail"]

    def test_empty_text(self, client: TestClient) -> None:
        response = client.post("/v1/analyse", json={"text": ""})
        assert response.status_code == 422

    def test_too_long_text(self, client: TestClient) -> None:
        response = client.post("/v1/analyse", json={"text": AI_TEXT * 10})
        assert response.status_code == 422
        assert "-word limit" in response.json()["detail"]

    def test_rate_limit(self) -> None:
        limiter = RateLimiter(max_request_per_interval=1, interval=timedelta(minutes=1))
        with TestClient(create_app(limiter)) as client:
            assert client.post("/v1/analyse", json={"text": AI_TEXT}).status_code == 200
            assert client.post("/v1/analyse", json={"text": AI_TEXT}).status_code == 429

            # Other clients are not affected.
            response = client.post(
                "/v1/analyse",
                json={"text": AI_TEXT},
                headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
            )
            assert response.status_code == 200


class TestRateLimiter:
    """Tests of the in-memory rate limiter."""

    def test_invalid_limit(self) -> None:
        with pytest.raises(ValueError, match="max_request_per_interval"):
            RateLimiter(max_request_per_interval=0)

    def test_invalid_interval(self) -> None:
        with pytest.raises(ValueError, match="interval"):
            RateLimiter(max_request_per_interval=1, interval=timedelta(0))

    def test_limit_per_identifier(self) -> None:
        limiter = RateLimiter(max_request_per_interval=2, interval=timedelta(hours=1))
        limiter("alice")
        limiter("alice")
        limiter("bob")
        with pytest.raises(HTTPException) as exc_info:
            limiter("alice")
        assert exc_info.value.status_code == 429

    def test_window_slides(self) -> None:
        limiter = RateLimiter(
            max_request_per_interval=1, interval=timedelta(microseconds=1)
        )
        limiter("alice")
        # A request older than the interval no longer counts.
        limiter._requests["alice"][0] -= timedelta(seconds=1)
        limiter("alice")

    def test_idle_clients_are_forgotten(self) -> None:
        limiter = RateLimiter(max_request_per_interval=1, interval=timedelta(hours=1))
        limiter("alice")
        limiter("bob")
        limiter._requests["alice"][0] -= timedelta(hours=2)

        limiter("carol")

        assert set(limiter._requests) == {"bob", "carol"}
