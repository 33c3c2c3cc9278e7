import logging
from datetime import datetime

import pytest

from app.services.responses import RESPONSES


def parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


# ------------------------
# GET /health
# ------------------------
def test_health(client):
    res = client.get("/health")

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    parse_ts(body["timestamp"])


def test_health_does_not_touch_database(broken_client):
    res = broken_client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


# ------------------------
# POST /api/ask
# ------------------------
def test_ask_returns_answer(client):
    res = client.post("/api/ask", json={"question": "Will this test pass?"})

    assert res.status_code == 200
    body = res.json()
    assert body["question"] == "Will this test pass?"
    assert body["response"] in RESPONSES
    parse_ts(body["timestamp"])


def test_ask_trims_question(client):
    res = client.post("/api/ask", json={"question": "   Should I?  "})

    assert res.status_code == 200
    assert res.json()["question"] == "Should I?"
    assert client.get("/api/history").json()[0]["question"] == "Should I?"


@pytest.mark.parametrize(
    "payload",
    [
        {"question": ""},
        {"question": "    "},
        {},
        {"question": None},
        {"question": 123},
        {"question": ["a"]},
        ["not", "an", "object"],
    ],
)
def test_ask_rejects_invalid_body(client, store, payload):
    res = client.post("/api/ask", json=payload)

    assert res.status_code == 400
    assert res.json() == {"error": "Question is required"}
    assert store.recent(10) == []


def test_ask_rejects_missing_body(client):
    res = client.post("/api/ask")

    assert res.status_code == 400
    assert res.json() == {"error": "Question is required"}


def test_ask_storage_failure_is_500_without_details(broken_client, caplog):
    with caplog.at_level(logging.ERROR):
        res = broken_client.post("/api/ask", json={"question": "Is the database up?"})

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    assert "POST /api/ask failed" in caplog.text


# ------------------------
# GET /api/history
# ------------------------
def test_history_empty(client):
    res = client.get("/api/history")

    assert res.status_code == 200
    assert res.json() == []


def test_ask_then_history_shows_newest_first(client):
    client.post("/api/ask", json={"question": "first"})
    asked = client.post("/api/ask", json={"question": "second"}).json()

    history = client.get("/api/history").json()
    assert [h["question"] for h in history] == ["second", "first"]
    assert history[0]["response"] == asked["response"]
    assert set(history[0]) == {"question", "response", "asked_at"}


def test_history_is_bounded_and_sorted(client):
    for i in range(12):
        client.post("/api/ask", json={"question": f"q{i}"})

    history = client.get("/api/history").json()
    assert len(history) == 10
    assert history[0]["question"] == "q11"
    stamps = [parse_ts(h["asked_at"]) for h in history]
    assert stamps == sorted(stamps, reverse=True)


def test_history_storage_failure_is_500(broken_client):
    res = broken_client.get("/api/history")

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}


# ------------------------
# 정적 페이지 / 미들웨어
# ------------------------
def test_index_is_html(client):
    res = client.get("/")

    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert "Magic Eight Ball" in res.text


def test_static_assets_are_served(client):
    assert client.get("/script.js").status_code == 200
    assert client.get("/style.css").status_code == 200
    assert client.get("/missing.js").status_code == 404


def test_security_headers(client):
    res = client.get("/health")

    csp = res.headers["content-security-policy"]
    assert "default-src 'self'" in csp
    assert "script-src 'self'" in csp
    assert res.headers["x-content-type-options"] == "nosniff"
    assert res.headers["x-frame-options"] == "SAMEORIGIN"


def test_cors_allows_any_origin(client):
    res = client.get("/api/history", headers={"Origin": "http://example.com"})
    assert res.headers["access-control-allow-origin"] == "*"
