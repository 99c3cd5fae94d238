"""Runtime configuration read from the environment."""
from __future__ import annotations
import os

ANTHROPIC_API_URL = os.getenv("ANTHROPIC_API_URL", "https://api.anthropic.com/v1/messages")
MODEL_ID = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-5-20250929")
REQUEST_TIMEOUT_S = float(os.getenv("RADREPORT_TIMEOUT_S", "120.0"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

API_KEY_ENV = "ANTHROPIC_API_KEY"

# Fixed by the API contract and the product; not read from the environment.
ANTHROPIC_VERSION = "2023-06-01"
MAX_TOKENS = 1024
MAX_CHARACTERS = 2000


def get_api_key() -> str | None:
    """Return the credential from the environment, or None when unset or blank."""
    value = os.getenv(API_KEY_ENV)
    return value or None
