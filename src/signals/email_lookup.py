"""
src/signals/email_lookup.py
============================
Email Reputation Collector — CandidateGuard

Responsibility:
    - Query the email validation service for one address
    - Interpret the response as an EmailSignal (valid_format, disposable)
    - Return a failed SignalResult on any transport, status or body error

This module does NOT:
    - Check email syntax locally (delegated to the service)
    - Retry failed lookups
    - Apply the conservative default (the pipeline does that)
"""

import logging
from typing import Any

import aiohttp

from src import config
from src.signals.http import fetch_json
from src.signals.models import EmailSignal
from src.signals.result import SignalResult

logger = logging.getLogger("candidateguard.signals.email")


def _read_flag(body: dict[str, Any], *keys: str) -> bool | None:
    """
    Read a boolean flag that the service may report either bare
    (``true``) or wrapped (``{"value": true, "text": "TRUE"}``).

    The first key present wins. Returns None only if no key is present.

    Raises:
        ValueError: If the first present key does not hold a bool.
    """
    for key in keys:
        if key not in body:
            continue
        raw = body[key]
        if isinstance(raw, dict):
            raw = raw.get("value")
        if not isinstance(raw, bool):
            raise ValueError(f"Email response {key!r} is not a bool: {raw!r}")
        return raw
    return None


def _parse_email_response(body: dict[str, Any]) -> EmailSignal:
    """
    Build an EmailSignal from the service response body.

    A missing disposable flag is read as not disposable; a missing
    format flag, or any flag present with a non-bool value, makes the
    body unusable.

    Raises:
        ValueError: If is_valid_format is absent, or a flag is not a bool.
    """
    valid_format = _read_flag(body, "is_valid_format")
    if valid_format is None:
        raise ValueError("Email response has no is_valid_format flag")

    disposable = _read_flag(body, "is_disposable_email", "is_disposable")
    if disposable is None:
        disposable = False

    return EmailSignal(valid_format=valid_format, disposable=disposable)


async def collect_email_signal(
    session: aiohttp.ClientSession,
    email: str,
    api_key: str,
) -> SignalResult[EmailSignal]:
    """
    Look up *email* with the reputation service.

    Never raises: every failure becomes ``SignalResult.failure``.
    """
    try:
        body = await fetch_json(
            session,
            config.EMAIL_VALIDATION_URL,
            {"api_key": api_key, "email": email},
        )
        signal = _parse_email_response(body)
    except Exception as exc:
        logger.warning("Email validation failed: %s", exc)
        return SignalResult.failure(f"email lookup failed: {exc}")

    logger.info(
        "Email signal: valid_format=%s, disposable=%s",
        signal.valid_format,
        signal.disposable,
    )
    return SignalResult.success(signal)
