"""
src/pipeline.py
================
Validation Pipeline Orchestrator — CandidateGuard

Responsibility:
    1. Validate the submission (fatal: InvalidRequestError)
    2. Resolve upstream credentials (fatal: MissingCredentialsError)
    3. Run the three signal collectors concurrently, each under a timeout
    4. Collapse failed collectors into their conservative defaults
    5. Score the signals and assemble the response body

Pipeline order:
    request → input validator → collectors → risk scorer → formatter

A collector failure never fails the request: it degrades to the
worst-case default for that signal. Only steps 1, 2 and 5 can raise.
"""

import asyncio
import logging
from typing import Any, Awaitable, TypeVar

import aiohttp

from src import config
from src.risk.formatter import format_verdict
from src.risk.scorer import compute_verdict
from src.signals.ai_detection import collect_ai_signal
from src.signals.email_lookup import collect_email_signal
from src.signals.models import (
    DEFAULT_AI_SIGNAL,
    DEFAULT_EMAIL_SIGNAL,
    DEFAULT_PHONE_SIGNAL,
)
from src.signals.phone_lookup import collect_phone_signal
from src.signals.result import SignalResult
from src.submission import parse_submission

logger = logging.getLogger("candidateguard.pipeline")

T = TypeVar("T")


async def _bounded(
    name: str,
    collector: Awaitable[SignalResult[T]],
    timeout: float,
) -> SignalResult[T]:
    """Await *collector*, converting a timeout into a failed result."""
    try:
        return await asyncio.wait_for(collector, timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("%s collector timed out after %.1fs", name, timeout)
        return SignalResult.failure(f"{name} collector timed out")


async def run_validation(payload: Any) -> dict[str, Any]:
    """
    Run the full candidate validation for one request body.

    Args:
        payload: Decoded JSON request body.

    Returns:
        The 200 response body (see src/risk/formatter.py).

    Raises:
        InvalidRequestError: Email or phone missing. No external calls made.
        MissingCredentialsError: An upstream API key is not configured.
    """
    submission = parse_submission(payload)
    credentials = config.load_credentials()
    timeout = config.collector_timeout()

    logger.info("Validating candidate submission.")

    async with aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=timeout),
    ) as session:
        email_result, phone_result, ai_result = await asyncio.gather(
            _bounded(
                "email",
                collect_email_signal(session, submission.email, credentials.email_key),
                timeout,
            ),
            _bounded(
                "phone",
                collect_phone_signal(session, submission.phone, credentials.phone_key),
                timeout,
            ),
            _bounded(
                "ai",
                collect_ai_signal(submission.resume_text, credentials.ai_key, timeout),
                timeout,
            ),
        )

    failed = [
        name
        for name, result in (
            ("email", email_result),
            ("phone", phone_result),
            ("ai", ai_result),
        )
        if not result.ok
    ]
    if failed:
        logger.warning("Using conservative defaults for: %s", ", ".join(failed))

    verdict = compute_verdict(
        email_result.value_or(DEFAULT_EMAIL_SIGNAL),
        phone_result.value_or(DEFAULT_PHONE_SIGNAL),
        ai_result.value_or(DEFAULT_AI_SIGNAL),
    )

    return format_verdict(submission, verdict)
