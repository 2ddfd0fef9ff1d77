"""
src/signals/ai_detection.py
============================
AI-Authorship Collector — CandidateGuard

Responsibility:
    - Short-circuit when no resume text was submitted (no API call)
    - Ask the text-generation model how likely the resume is AI-written
    - Parse the reply with parse_ai_reply() into an AiSignal
    - Return a failed SignalResult on transport errors or unusable replies

This module does NOT:
    - Retry (the OpenAI client is built with max_retries=0)
    - Compute risk scores
    - Log resume text
"""

import asyncio
import logging

from openai import OpenAI

from src import config
from src.signals.models import AiSignal, NO_RESUME_TEXT_REASONING
from src.signals.reply_parser import parse_ai_reply
from src.signals.result import SignalResult

logger = logging.getLogger("candidateguard.signals.ai_detection")


# ---------------------------------------------------------------------------
# Prompt: strict JSON-only reply
# ---------------------------------------------------------------------------

_SYSTEM_PROMPT: str = (
    "You are an AI-authorship detector for job applications. "
    "You estimate whether a resume was written by a human or generated "
    "by an AI assistant (ChatGPT, Claude, etc.).\n\n"
    "RULES:\n"
    "- You MUST return ONLY a valid JSON object with exactly two keys: "
    '"probability" and "reasoning".\n'
    '- "probability" MUST be an integer from 0 to 100 '
    "(0 = definitely human, 100 = definitely AI).\n"
    '- "reasoning" MUST be a brief explanation in one or two sentences.\n'
    "- Do NOT use markdown or code blocks.\n"
    "- Do NOT include any other keys or text.\n\n"
    "EXAMPLE OUTPUT:\n"
    '{"probability": 35, "reasoning": "Specific project details and uneven '
    'phrasing suggest a human author."}\n'
)

_MAX_TOKENS = 500


def _build_user_message(resume_text: str) -> str:
    return f"Analyze the following resume text.\n\nResume:\n{resume_text}"


def _request_estimate(resume_text: str, api_key: str, timeout: float) -> str:
    """
    Send the resume to the model and return its raw reply text.

    Blocking; run via asyncio.to_thread.

    Raises:
        openai.OpenAIError: If the API call fails or times out.
    """
    with OpenAI(api_key=api_key, timeout=timeout, max_retries=0) as client:
        response = client.chat.completions.create(
            model=config.AI_DETECTION_MODEL,
            messages=[
                {"role": "system", "content": _SYSTEM_PROMPT},
                {"role": "user", "content": _build_user_message(resume_text)},
            ],
            temperature=0.0,
            max_tokens=_MAX_TOKENS,
        )

    if not response.choices:
        return ""
    return response.choices[0].message.content or ""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def collect_ai_signal(
    resume_text: str | None,
    api_key: str,
    timeout: float = config.DEFAULT_COLLECTOR_TIMEOUT,
) -> SignalResult[AiSignal]:
    """
    Estimate the AI-authorship probability of *resume_text*.

    Empty or whitespace-only text yields probability 0 with a fixed
    reasoning string, and no request is made.

    Never raises: every failure becomes ``SignalResult.failure``.
    """
    if not resume_text or not resume_text.strip():
        logger.info("No resume text submitted, skipping AI detection.")
        return SignalResult.success(
            AiSignal(probability=0, reasoning=NO_RESUME_TEXT_REASONING)
        )

    logger.info("Requesting AI-authorship estimate (%d chars).", len(resume_text))

    try:
        raw_reply = await asyncio.to_thread(
            _request_estimate, resume_text, api_key, timeout
        )
    except Exception as exc:
        logger.warning("AI detection request failed: %s", exc)
        return SignalResult.failure(f"ai detection failed: {exc}")

    signal = parse_ai_reply(raw_reply)
    if signal is None:
        logger.warning("AI detection reply could not be parsed.")
        return SignalResult.failure("ai detection reply unparseable")

    logger.info("AI signal: probability=%d", signal.probability)
    return SignalResult.success(signal)
