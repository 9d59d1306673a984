import logging

import pytest

from app.core.errors import ErrorCategory, GenerationError
from app.utils.logger import ExtraFormatter


def test_root_lists_generate_route(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["generate"] == "POST /api/generate"


def test_health_configured(client):
    r = client.get("/health")
    assert r.json() == {"status": "ok", "providers": {"gemini": "configured"}}
    assert "test-key" not in r.text


def test_health_missing_key(client, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY")
    r = client.get("/health")
    assert r.json() == {"status": "degraded", "providers": {"gemini": "missing_key"}}


@pytest.mark.parametrize(
    "category, status",
    [
        (ErrorCategory.VALIDATION, 400),
        (ErrorCategory.CONFIGURATION, 500),
        (ErrorCategory.AUTHENTICATION, 401),
        (ErrorCategory.RATE_LIMIT, 429),
        (ErrorCategory.CONTENT_FILTERED, 400),
        (ErrorCategory.EMPTY_RESPONSE, 500),
        (ErrorCategory.UNKNOWN, 500),
    ],
)
def test_error_category_status(category, status):
    assert GenerationError(category).status_code == status


def test_unknown_error_has_no_details():
    assert GenerationError(ErrorCategory.UNKNOWN).to_dict() == {"error": "Internal server error"}


def test_formatter_appends_and_redacts_extras():
    formatter = ExtraFormatter("%(message)s")
    record = logging.makeLogRecord({"msg": "provider_call_started", "provider": "gemini", "api_key": "abc"})
    line = formatter.format(record)
    assert line.startswith("provider_call_started | ")
    assert "provider=gemini" in line
    assert "abc" not in line
