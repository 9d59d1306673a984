# =============================================================================
# app/core/errors.py — Generation error categories and their HTTP mapping
# =============================================================================
# Every failure of POST /api/generate is a GenerationError. The category
# decides the status code and the public "error" string; "details" is the
# only other text that reaches the caller.
# =============================================================================

from enum import Enum


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate-limit"
    CONTENT_FILTERED = "content-filtered"
    EMPTY_RESPONSE = "empty-response"
    UNKNOWN = "unknown"


CATEGORY_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.CONFIGURATION: 500,
    ErrorCategory.AUTHENTICATION: 401,
    ErrorCategory.RATE_LIMIT: 429,
    ErrorCategory.CONTENT_FILTERED: 400,
    ErrorCategory.EMPTY_RESPONSE: 500,
    ErrorCategory.UNKNOWN: 500,
}

# (error, details) shown to the caller for categories with a fixed message
DEFAULT_MESSAGES: dict[ErrorCategory, tuple[str, str | None]] = {
    ErrorCategory.CONFIGURATION: ("Server configuration error", "API key is not configured"),
    ErrorCategory.AUTHENTICATION: ("Authentication failed", "Invalid or expired API key"),
    ErrorCategory.RATE_LIMIT: (
        "Rate limit exceeded",
        "API quota limit reached. Please try again later.",
    ),
    ErrorCategory.CONTENT_FILTERED: (
        "Content filtered",
        "Content was filtered by safety systems. Please try different input.",
    ),
    ErrorCategory.EMPTY_RESPONSE: (
        "Empty response from AI",
        "The AI service returned an empty response",
    ),
    ErrorCategory.UNKNOWN: ("Internal server error", None),
}


class GenerationError(Exception):
    def __init__(
        self,
        category: ErrorCategory,
        message: str | None = None,
        details: str | None = None,
    ) -> None:
        default_message, default_details = DEFAULT_MESSAGES.get(category, ("Request failed", None))
        self.category = category
        self.message = message or default_message
        self.details = details if message else (details or default_details)
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return CATEGORY_STATUS[self.category]

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


def validation_error(message: str, details: str) -> GenerationError:
    return GenerationError(ErrorCategory.VALIDATION, message, details)
