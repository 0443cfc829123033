from datetime import timedelta

import pytest
from conftest import LEVERAGED_TEXT, PinnedRandom
from fastapi.testclient import TestClient

from textorigin.analysis import Analyser
from textorigin.api import dependencies
from textorigin.api.app import create_app
from textorigin.api.dependencies import enforce_rate_limit, get_analyser
from textorigin.api.rate_limiter import RateLimiter
from textorigin.configuration import config


@pytest.fixture
def client():
    app = create_app()
    app.dependency_overrides[get_analyser] = lambda: Analyser(
        PinnedRandom(0.0), processing_delay=timedelta(0)
    )
    app.dependency_overrides[enforce_rate_limit] = lambda: None
    with TestClient(app) as test_client:
        yield test_client


def test_healthcheck(client):
    response = client.get("/v1/healthcheck")

    assert response.status_code == 200
    assert response.json() == {"is_healthy": True}


def test_root_redirects_to_docs(client):
    response = client.get("/", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/v1/docs"


def test_analyse_text(client):
    response = client.post("/v1/analyse", json={"text": LEVERAGED_TEXT})

    assert response.status_code == 200
    payload = response.json()
    assert payload["isAiGenerated"] is True
    assert payload["aiProbability"] == 98
    assert payload["humanProbability"] == 2
    assert payload["linguisticAnalysis"]["vocabularyRichness"] == 9
    assert "Repetitive vocabulary usage" in payload["flags"]


@pytest.mark.parametrize("body", [{"text": ""}, {"text": "  \n "}, {}])
def test_analyse_rejects_missing_text(client, body):
    response = client.post("/v1/analyse", json=body)

    assert response.status_code == 422


def test_analyse_file(client):
    response = client.post(
        "/v1/analyse/file",
        files={"file": ("cv.txt", LEVERAGED_TEXT.encode(), "text/plain")},
    )

    assert response.status_code == 200
    assert response.json()["aiProbability"] == 98


def test_analyse_empty_file(client):
    response = client.post(
        "/v1/analyse/file", files={"file": ("cv.txt", b"   ", "text/plain")}
    )

    assert response.status_code == 422
    assert "No text content" in response.json()["detail"]


def test_analyse_too_large_file(client, monkeypatch):
    monkeypatch.setattr(config, "max_upload_size", 8)

    response = client.post(
        "/v1/analyse/file",
        files={"file": ("cv.txt", LEVERAGED_TEXT.encode(), "text/plain")},
    )

    assert response.status_code == 413


def test_rate_limit(monkeypatch):
    monkeypatch.setattr(
        dependencies, "rate_limiter", RateLimiter(1, timedelta(minutes=1))
    )
    app = create_app()
    app.dependency_overrides[get_analyser] = lambda: Analyser(
        PinnedRandom(0.0), processing_delay=timedelta(0)
    )

    with TestClient(app) as client:
        first = client.post("/v1/analyse", json={"text": "Hello there."})
        second = client.post("/v1/analyse", json={"text": "Hello there."})
        other_client = client.post(
            "/v1/analyse",
            json={"text": "Hello there."},
            headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
        )

    assert first.status_code == 200
    assert second.status_code == 429
    assert other_client.status_code == 200


def test_analyse_corrupt_pdf(client):
    response = client.post(
        "/v1/analyse/file",
        files={"file": ("cv.pdf", b"%PDF-1.7 \x00\xff garbage", "application/pdf")},
    )

    assert response.status_code == 422
