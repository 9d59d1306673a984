import os

GEMINI_KEY_ENV = "GEMINI_API_KEY"


def read_gemini_key() -> str | None:
    # Read on every call; the key is never cached in Settings.
    key = os.getenv(GEMINI_KEY_ENV, "")
    if not key or not key.strip():
        return None
    return key.strip()


def gemini_key_status() -> str:
    return "configured" if read_gemini_key() else "missing_key"
