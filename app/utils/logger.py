# -----------------------------------------------------------------------------
# app/utils/logger.py — Application logger with key=value extras
# -----------------------------------------------------------------------------
# Usage: logger.info("event_name", extra={"field": value})
# -----------------------------------------------------------------------------

import logging
import sys

LOGGER_NAME = "resume_ai"
SENSITIVE_KEYS = ("key", "token", "secret", "password", "authorization")

# Attributes every LogRecord has; anything else came in through extra=
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def sanitize_log_data(data: dict) -> dict:
    sanitized = data.copy()
    for key in sanitized:
        if any(s in key.lower() for s in SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
    return sanitized


class ExtraFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}
        if not extras:
            return base
        fields = " ".join(f"{k}={v}" for k, v in sanitize_log_data(extras).items())
        return f"{base} | {fields}"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger


logger = logging.getLogger(LOGGER_NAME)

_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(
    ExtraFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
)
