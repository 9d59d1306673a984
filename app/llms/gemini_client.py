# =============================================================================
# app/llms/gemini_client.py — Google Gemini generateContent client
# =============================================================================
# The API key is passed in by the caller on every generate() call; this
# module never reads it from the environment. Every failure leaves here as
# a ProviderError with a kind, so callers do not parse provider messages.
# No retries: one request per generate() call.
# =============================================================================

import httpx

from app.core.config import get_settings
from app.llms.base import BaseLLM, GenerationParams, ProviderError, ProviderErrorKind

GEMINI_PROVIDER_NAME = "gemini"
BLOCKING_FINISH_REASONS = ("SAFETY", "RECITATION", "BLOCKLIST", "PROHIBITED_CONTENT", "SPII")


def build_payload(prompt: str, params: GenerationParams) -> dict:
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": params.temperature,
            "topK": params.top_k,
            "topP": params.top_p,
            "maxOutputTokens": params.max_output_tokens,
        },
    }


def _error_body(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    error = data.get("error") if isinstance(data, dict) else None
    return error if isinstance(error, dict) else {}


def _error_reasons(error: dict) -> set[str]:
    reasons = set()
    for detail in error.get("details") or []:
        if isinstance(detail, dict) and detail.get("reason"):
            reasons.add(str(detail["reason"]))
    return reasons


def classify_http_error(response: httpx.Response) -> ProviderError:
    error = _error_body(response)
    message = str(error.get("message") or response.text or f"HTTP {response.status_code}")[:500]
    status = str(error.get("status") or "")
    code = response.status_code
    if code in (401, 403) or "API_KEY_INVALID" in _error_reasons(error):
        return ProviderError(ProviderErrorKind.AUTHENTICATION, message, code)
    if code == 429 or status == "RESOURCE_EXHAUSTED":
        return ProviderError(ProviderErrorKind.RATE_LIMIT, message, code)
    return ProviderError.from_message(message, code)


def extract_text(data: dict) -> str:
    """Join the text parts of the first candidate.

    A blocked prompt, or a candidate stopped by a safety or recitation
    filter, is a content-filtered error even when partial text came back.
    """
    feedback = data.get("promptFeedback") or {}
    block_reason = feedback.get("blockReason")
    if block_reason:
        raise ProviderError(
            ProviderErrorKind.CONTENT_FILTERED,
            f"Prompt was blocked due to {block_reason}",
        )
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    first = candidates[0]
    content = first.get("content") or {}
    parts = content.get("parts") or []
    text = "".join(part.get("text") or "" for part in parts if isinstance(part, dict))
    finish_reason = first.get("finishReason")
    if finish_reason in BLOCKING_FINISH_REASONS:
        raise ProviderError(
            ProviderErrorKind.CONTENT_FILTERED,
            f"Response was blocked due to {finish_reason}",
        )
    return text


class GeminiClient(BaseLLM):
    name = GEMINI_PROVIDER_NAME

    def __init__(self, model: str | None = None) -> None:
        settings = get_settings()
        self.model = model or settings.gemini_model
        self._base_url = settings.gemini_base_url.rstrip("/")
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=get_settings().request_timeout)
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @property
    def url(self) -> str:
        return f"{self._base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str, params: GenerationParams, api_key: str) -> str:
        client = await self._get_client()
        try:
            r = await client.post(
                self.url,
                headers={"x-goog-api-key": api_key},
                json=build_payload(prompt, params),
            )
        except httpx.RequestError as e:
            raise ProviderError.from_message(f"Gemini API unreachable: {e!s}") from e
        if r.is_error:
            raise classify_http_error(r)
        try:
            data = r.json()
        except ValueError as e:
            raise ProviderError(
                ProviderErrorKind.UNKNOWN, "Gemini API returned a non-JSON body", r.status_code
            ) from e
        if not isinstance(data, dict):
            raise ProviderError(
                ProviderErrorKind.UNKNOWN, "Gemini API returned an unexpected body", r.status_code
            )
        return extract_text(data)
