"""
src/signals/phone_lookup.py
============================
Phone Reputation Collector — CandidateGuard

Responsibility:
    - Query the phone intelligence service for one number
    - Interpret the response as a PhoneSignal (valid, line_type)
    - Return a failed SignalResult on any transport, status or body error
"""

import logging
from typing import Any

import aiohttp

from src import config
from src.signals.http import fetch_json
from src.signals.models import LineType, PhoneSignal
from src.signals.result import SignalResult

logger = logging.getLogger("candidateguard.signals.phone")


def _classify_line_type(raw: Any) -> LineType:
    """Map the service's free-form line type onto voip / other / unknown."""
    if not isinstance(raw, str) or not raw.strip():
        return LineType.UNKNOWN
    if raw.strip().lower() == LineType.VOIP.value:
        return LineType.VOIP
    return LineType.OTHER


def _parse_phone_response(body: dict[str, Any]) -> PhoneSignal:
    """
    Build a PhoneSignal from the service response body.

    Raises:
        ValueError: If ``valid`` is absent or not a bool.
    """
    valid = body.get("valid")
    if not isinstance(valid, bool):
        raise ValueError(
            f"Phone response 'valid' must be bool, got {type(valid).__name__}"
        )
    return PhoneSignal(valid=valid, line_type=_classify_line_type(body.get("type")))


async def collect_phone_signal(
    session: aiohttp.ClientSession,
    phone: str,
    api_key: str,
) -> SignalResult[PhoneSignal]:
    """
    Look up *phone* with the reputation service.

    Never raises: every failure becomes ``SignalResult.failure``.
    """
    try:
        body = await fetch_json(
            session,
            config.PHONE_VALIDATION_URL,
            {"api_key": api_key, "phone": phone},
        )
        signal = _parse_phone_response(body)
    except Exception as exc:
        logger.warning("Phone validation failed: %s", exc)
        return SignalResult.failure(f"phone lookup failed: {exc}")

    logger.info(
        "Phone signal: valid=%s, line_type=%s",
        signal.valid,
        signal.line_type.value,
    )
    return SignalResult.success(signal)
