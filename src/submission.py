"""
src/submission.py
==================
Input Validator — CandidateGuard

Responsibility:
    - Read the candidate fields from the decoded request body
    - Reject submissions without an email or phone

Email and phone are presence-checked only: any truthy value passes.
Format validity is the email reputation service's job.
"""

import logging
from dataclasses import dataclass
from typing import Any

from src.errors import InvalidRequestError

logger = logging.getLogger("candidateguard.submission")


@dataclass(frozen=True)
class CandidateSubmission:
    """One candidate's submitted contact details and resume text."""

    email: str
    phone: str
    name: str | None = None
    linkedin_url: str | None = None
    resume_text: str | None = None


def _optional_str(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def parse_submission(payload: Any) -> CandidateSubmission:
    """
    Validate the request body and build a CandidateSubmission.

    Args:
        payload: Decoded JSON body. Anything other than an object is
            treated as an empty submission.

    Raises:
        InvalidRequestError: If candidateEmail or candidatePhone is
            missing or empty.
    """
    if not isinstance(payload, dict):
        payload = {}

    email = payload.get("candidateEmail")
    phone = payload.get("candidatePhone")

    if not email or not phone:
        logger.info("Rejected submission: email or phone missing.")
        raise InvalidRequestError("Email and phone are required")

    return CandidateSubmission(
        email=email if isinstance(email, str) else str(email),
        phone=phone if isinstance(phone, str) else str(phone),
        name=_optional_str(payload, "candidateName"),
        linkedin_url=_optional_str(payload, "linkedinUrl"),
        resume_text=_optional_str(payload, "resumeText"),
    )
