"""
src/signals/reply_parser.py
============================
AI-Detection Reply Parser — CandidateGuard

Responsibility:
    - Turn the text-generation model's free-text reply into an AiSignal
    - Strip code-fence markup the model may wrap around its JSON
    - Reject anything that is not a JSON object with a numeric
      "probability" and a non-empty string "reasoning"

The reply is untrusted input. parse_ai_reply() is pure and never raises:
any malformed reply yields None, which the collector reports as a failure.
"""

import json
import logging
import math
import re
from typing import Any

from src.signals.models import AiSignal

logger = logging.getLogger("candidateguard.signals.reply_parser")

# Opening (```json) or closing (```) fence, with an optional trailing newline
_FENCE_PATTERN = re.compile(r"```(?:json)?[ \t]*\r?\n?", re.IGNORECASE)

PROBABILITY_MIN = 0
PROBABILITY_MAX = 100


def strip_code_fences(raw: str) -> str:
    """Remove every code-fence marker from *raw* and trim whitespace."""
    text = raw
    while True:
        stripped = _FENCE_PATTERN.sub("", text)
        if stripped == text:
            break
        text = stripped
    return text.strip()


def _coerce_probability(value: Any) -> int | None:
    # bool is an int subclass; "true" is not a probability
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    # Round up: any value above a breakpoint (40, 70) stays above it
    clamped = min(max(value, PROBABILITY_MIN), PROBABILITY_MAX)
    return int(math.ceil(clamped))


def parse_ai_reply(raw: str | None) -> AiSignal | None:
    """
    Parse the model's reply into an AiSignal.

    Args:
        raw: Reply text, possibly wrapped in ```json ... ``` fences.

    Returns:
        AiSignal with probability clamped and rounded up to [0, 100],
        or None if the reply is not a usable JSON object.
    """
    if not isinstance(raw, str):
        return None

    text = strip_code_fences(raw)
    if not text:
        logger.debug("AI reply is empty after fence stripping")
        return None

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        logger.debug("AI reply is not valid JSON: %r", text[:200])
        return None

    if not isinstance(parsed, dict):
        logger.debug("AI reply is JSON %s, expected object", type(parsed).__name__)
        return None

    probability = _coerce_probability(parsed.get("probability"))
    if probability is None:
        logger.debug("AI reply has no usable probability: %r", parsed.get("probability"))
        return None

    reasoning = parsed.get("reasoning")
    if not isinstance(reasoning, str) or not reasoning.strip():
        logger.debug("AI reply has no usable reasoning")
        return None

    return AiSignal(probability=probability, reasoning=reasoning.strip())
