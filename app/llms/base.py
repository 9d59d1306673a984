from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1024
TOP_K = 40
TOP_P = 0.95


@dataclass(frozen=True)
class GenerationParams:
    temperature: float = DEFAULT_TEMPERATURE
    max_output_tokens: int = DEFAULT_MAX_TOKENS
    top_k: int = TOP_K
    top_p: float = TOP_P

    @classmethod
    def from_request(cls, temperature: float | None, max_tokens: int | None) -> "GenerationParams":
        return cls(
            temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
            max_output_tokens=DEFAULT_MAX_TOKENS if max_tokens is None else max_tokens,
        )


class ProviderErrorKind(str, Enum):
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate-limit"
    CONTENT_FILTERED = "content-filtered"
    UNKNOWN = "unknown"


def classify_provider_message(message: str) -> ProviderErrorKind:
    """Last-resort classification of a provider message that carried no
    structured status. Checked in order; the first match wins."""
    if "API key" in message:
        return ProviderErrorKind.AUTHENTICATION
    if "quota" in message or "limit" in message:
        return ProviderErrorKind.RATE_LIMIT
    if "blocked" in message or "safety" in message:
        return ProviderErrorKind.CONTENT_FILTERED
    return ProviderErrorKind.UNKNOWN


class ProviderError(Exception):
    def __init__(self, kind: ProviderErrorKind, message: str, status_code: int | None = None) -> None:
        self.kind = kind
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_message(cls, message: str, status_code: int | None = None) -> "ProviderError":
        return cls(classify_provider_message(message), message, status_code)


class BaseLLM(ABC):
    name: str = ""

    @abstractmethod
    async def generate(self, prompt: str, params: GenerationParams, api_key: str) -> str:
        """Return the generated text for a single user-turn prompt.

        Raises ProviderError on any provider-side failure.
        """

    async def close(self) -> None:
        return None
