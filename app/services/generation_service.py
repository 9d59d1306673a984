import time

from pydantic import ValidationError

from app.core.errors import ErrorCategory, GenerationError, validation_error
from app.core.security import GEMINI_KEY_ENV, read_gemini_key
from app.llms.base import BaseLLM, GenerationParams, ProviderError, ProviderErrorKind
from app.llms.gemini_client import GeminiClient
from app.schemas.request import GenerateRequest
from app.schemas.response import GenerateResponse
from app.services.prompts import build_resume_prompt
from app.utils.logger import logger

MIN_PROFILE_LENGTH = 10
MIN_JOB_LENGTH = 20

PROVIDER_ERROR_CATEGORIES = {
    ProviderErrorKind.AUTHENTICATION: ErrorCategory.AUTHENTICATION,
    ProviderErrorKind.RATE_LIMIT: ErrorCategory.RATE_LIMIT,
    ProviderErrorKind.CONTENT_FILTERED: ErrorCategory.CONTENT_FILTERED,
    ProviderErrorKind.UNKNOWN: ErrorCategory.UNKNOWN,
}


def get_client() -> BaseLLM:
    return GeminiClient()


def _invalid(message: str, details: str) -> GenerationError:
    logger.info("validation_failed", extra={"reason": message})
    return validation_error(message, details)


def parse_generation_request(payload: object) -> GenerateRequest:
    """Validate a decoded JSON body.

    Checks run in a fixed order and stop at the first failure: both fields
    present, profile length, job length. Type checks on the optional fields
    come last so they never mask one of those three.
    """
    data = payload if isinstance(payload, dict) else {}
    profile = data.get("profile")
    job = data.get("job")
    if not profile or not job:
        raise _invalid("Missing required fields", "Both 'profile' and 'job' fields are required")
    if isinstance(profile, str) and len(profile.strip()) < MIN_PROFILE_LENGTH:
        raise _invalid(
            "Profile too short",
            f"Profile must be at least {MIN_PROFILE_LENGTH} characters long",
        )
    if isinstance(job, str) and len(job.strip()) < MIN_JOB_LENGTH:
        raise _invalid(
            "Job description too short",
            f"Job description must be at least {MIN_JOB_LENGTH} characters long",
        )
    try:
        return GenerateRequest.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()}))
        raise _invalid("Invalid request body", f"Invalid value for: {fields}") from e


async def call_provider(client: BaseLLM, prompt: str, params: GenerationParams, api_key: str) -> str:
    start = time.perf_counter()
    logger.info(
        "provider_call_started",
        extra={"provider": client.name, "prompt_chars": len(prompt)},
    )
    try:
        text = await client.generate(prompt, params, api_key)
    except ProviderError as e:
        logger.warning(
            "provider_error",
            extra={"provider": client.name, "kind": e.kind.value, "status": e.status_code, "error": str(e)},
        )
        raise GenerationError(PROVIDER_ERROR_CATEGORIES[e.kind]) from e
    except Exception as e:
        logger.exception("provider_call_failed", extra={"provider": client.name})
        raise GenerationError(ErrorCategory.UNKNOWN) from e
    finally:
        await client.close()
    latency_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "provider_call_finished",
        extra={"provider": client.name, "latency_ms": round(latency_ms, 2)},
    )
    return text


async def generate_resume(payload: object, client: BaseLLM | None = None) -> GenerateResponse:
    request = parse_generation_request(payload)
    api_key = read_gemini_key()
    if api_key is None:
        logger.error("provider_not_configured", extra={"missing_env": GEMINI_KEY_ENV})
        raise GenerationError(ErrorCategory.CONFIGURATION)

    prompt = build_resume_prompt(request.profile, request.job)
    params = GenerationParams.from_request(request.temperature, request.max_tokens)
    client = client or get_client()
    text = (await call_provider(client, prompt, params, api_key)).strip()
    if not text:
        logger.error("provider_empty_response", extra={"provider": client.name})
        raise GenerationError(ErrorCategory.EMPTY_RESPONSE)

    logger.info("generation_succeeded", extra={"provider": client.name, "text_chars": len(text)})
    return GenerateResponse(text=text, provider=client.name)
