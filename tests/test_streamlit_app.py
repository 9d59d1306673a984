import requests

import streamlit_app


class _Resp:
    def __init__(self, status_code, payload=None, ok=False):
        self.status_code = status_code
        self._payload = payload
        self.ok = ok

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def test_form_needs_client_side_minimums():
    assert not streamlit_app.is_form_valid("x" * 39, "y" * 60)
    assert not streamlit_app.is_form_valid("x" * 40, "y" * 59)
    assert streamlit_app.is_form_valid(" " + "x" * 40, "y" * 60 + " ")


def test_error_message_uses_server_fields():
    r = _Resp(429, {"error": "Rate limit exceeded", "details": "Try later"})
    assert streamlit_app.error_message(r) == "Rate limit exceeded: Try later"
    assert streamlit_app.error_message(_Resp(500, {"error": "Internal server error"})) == "Internal server error"
    assert streamlit_app.error_message(_Resp(502)) == "HTTP 502"


def test_request_generation_posts_trimmed_fields(monkeypatch):
    seen = {}

    def fake_post(url, json=None, timeout=None):
        seen.update(url=url, json=json, timeout=timeout)
        return _Resp(200, {"text": "Resume", "provider": "gemini"}, ok=True)

    monkeypatch.setattr(streamlit_app.requests, "post", fake_post)
    result, error = streamlit_app.request_generation("  profile  ", " job ")
    assert error is None
    assert result == {"text": "Resume", "provider": "gemini"}
    assert seen["url"].endswith("/api/generate")
    assert seen["json"] == {"profile": "profile", "job": "job", "temperature": 0.7}


def test_request_generation_network_failure(monkeypatch):
    def fake_post(url, json=None, timeout=None):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(streamlit_app.requests, "post", fake_post)
    result, error = streamlit_app.request_generation("profile", "job")
    assert result is None
    assert error.startswith("Request failed")
