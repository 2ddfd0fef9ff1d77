"""
src/config.py
==============
Runtime Configuration — CandidateGuard

Responsibility:
    - Load .env into the process environment
    - Expose upstream endpoints, model name and collector timeout
    - Resolve the three upstream credentials per request

Credentials are read on every call to load_credentials() rather than at
import time, so a rotated key takes effect without a restart.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from src.errors import MissingCredentialsError

load_dotenv()

logger = logging.getLogger("candidateguard.config")


# ---------------------------------------------------------------------------
# Upstream endpoints and model
# ---------------------------------------------------------------------------

EMAIL_VALIDATION_URL: str = os.getenv(
    "EMAIL_VALIDATION_URL", "https://emailvalidation.abstractapi.com/v1/"
)
PHONE_VALIDATION_URL: str = os.getenv(
    "PHONE_VALIDATION_URL", "https://phoneintelligence.abstractapi.com/v1/"
)
AI_DETECTION_MODEL: str = os.getenv("AI_DETECTION_MODEL", "gpt-4o-mini")

DEFAULT_COLLECTOR_TIMEOUT: float = 10.0

# Environment variable names for the three upstream credentials
EMAIL_KEY_VAR = "ABSTRACT_API_EMAIL"
PHONE_KEY_VAR = "ABSTRACT_API_PHONE"
AI_KEY_VAR = "OPENAI_API_KEY"


@dataclass(frozen=True)
class Credentials:
    """API keys for the email, phone and text-generation services."""

    email_key: str
    phone_key: str
    ai_key: str


def load_credentials() -> Credentials:
    """
    Read the upstream API keys from the environment.

    Raises:
        MissingCredentialsError: If any key is unset or empty.
    """
    values = {
        name: os.environ.get(name, "")
        for name in (EMAIL_KEY_VAR, PHONE_KEY_VAR, AI_KEY_VAR)
    }
    missing = [name for name, value in values.items() if not value]
    if missing:
        logger.error("Upstream credentials not configured: %s", ", ".join(missing))
        raise MissingCredentialsError(missing)

    return Credentials(
        email_key=values[EMAIL_KEY_VAR],
        phone_key=values[PHONE_KEY_VAR],
        ai_key=values[AI_KEY_VAR],
    )


def collector_timeout() -> float:
    """Per-collector timeout in seconds (COLLECTOR_TIMEOUT_SECONDS)."""
    raw = os.getenv("COLLECTOR_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_COLLECTOR_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            "Invalid COLLECTOR_TIMEOUT_SECONDS=%r, using %.1fs",
            raw,
            DEFAULT_COLLECTOR_TIMEOUT,
        )
        return DEFAULT_COLLECTOR_TIMEOUT
    if value <= 0:
        logger.warning(
            "COLLECTOR_TIMEOUT_SECONDS must be positive, got %s, using %.1fs",
            raw,
            DEFAULT_COLLECTOR_TIMEOUT,
        )
        return DEFAULT_COLLECTOR_TIMEOUT
    return value
