import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.llms.base import BaseLLM, GenerationParams

VALID_PROFILE = "Senior backend engineer with 8 years building distributed systems"
VALID_JOB = (
    "We are looking for a backend engineer experienced in distributed systems "
    "and cloud infrastructure"
)


class FakeLLM(BaseLLM):
    """Records calls and either returns `text` or raises `error`."""

    name = "gemini"

    def __init__(self, text: str = "PROFESSIONAL SUMMARY\nBuilt things.", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, GenerationParams, str]] = []
        self.closed = False

    async def generate(self, prompt: str, params: GenerationParams, api_key: str) -> str:
        self.calls.append((prompt, params, api_key))
        if self.error is not None:
            raise self.error
        return self.text

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Never pick up a developer's real key or .env overrides
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.delenv("GEMINI_BASE_URL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_llm(monkeypatch):
    from app.services import generation_service

    llm = FakeLLM()
    monkeypatch.setattr(generation_service, "get_client", lambda: llm)
    return llm


@pytest.fixture
def client():
    from app.main import app

    return TestClient(app)
