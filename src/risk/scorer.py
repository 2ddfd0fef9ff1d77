"""
src/risk/scorer.py
===================
Deterministic Risk Scorer — CandidateGuard

Responsibility:
    - Accept the three collected signals (email, phone, AI authorship)
    - Score each signal independently with fixed additive weights
    - Sum, cap at 100, and classify the risk level from fixed thresholds

Scoring rubric:
    - email format invalid OR disposable        → +30
    - phone invalid OR VoIP line                → +25
    - AI probability > 70                       → +45
    - AI probability > 40 (up to and incl. 70)  → +25
    - otherwise                                 → +0

Risk level (on the capped score):
    >= 80 Critical, >= 60 High, >= 40 Medium, else Low

Weights and thresholds are constants, not configuration.

This module does NOT:
    - Call any external API
    - Substitute defaults for failed collectors (the pipeline does that)
    - Format the HTTP response
"""

import logging
from dataclasses import dataclass
from enum import Enum

from src.signals.models import AiSignal, EmailSignal, PhoneSignal

logger = logging.getLogger("candidateguard.risk.scorer")


# ---------------------------------------------------------------------------
# Fixed weights
# ---------------------------------------------------------------------------

EMAIL_RISK_POINTS: int = 30
PHONE_RISK_POINTS: int = 25
AI_HIGH_RISK_POINTS: int = 45
AI_MEDIUM_RISK_POINTS: int = 25

# AI probability breakpoints (strictly greater than)
AI_HIGH_THRESHOLD: int = 70
AI_MEDIUM_THRESHOLD: int = 40

MAX_SCORE: int = 100

# Risk level thresholds (greater than or equal)
LEVEL_THRESHOLD_CRITICAL: int = 80
LEVEL_THRESHOLD_HIGH: int = 60
LEVEL_THRESHOLD_MEDIUM: int = 40


class RiskLevel(str, Enum):
    """Categorical fraud-risk level."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


@dataclass(frozen=True)
class RiskVerdict:
    """Aggregated score and level, with the signals that produced it."""

    score: int
    level: RiskLevel
    email: EmailSignal
    phone: PhoneSignal
    ai: AiSignal


# ---------------------------------------------------------------------------
# Per-signal scorers
# ---------------------------------------------------------------------------


def _score_email(email: EmailSignal) -> int:
    if not email.valid_format or email.disposable:
        return EMAIL_RISK_POINTS
    return 0


def _score_phone(phone: PhoneSignal) -> int:
    if not phone.valid or phone.is_voip:
        return PHONE_RISK_POINTS
    return 0


def _score_ai(ai: AiSignal) -> int:
    if ai.probability > AI_HIGH_THRESHOLD:
        return AI_HIGH_RISK_POINTS
    if ai.probability > AI_MEDIUM_THRESHOLD:
        return AI_MEDIUM_RISK_POINTS
    return 0


def classify_level(score: int) -> RiskLevel:
    """Map a capped 0–100 score to its risk level."""
    if score >= LEVEL_THRESHOLD_CRITICAL:
        return RiskLevel.CRITICAL
    if score >= LEVEL_THRESHOLD_HIGH:
        return RiskLevel.HIGH
    if score >= LEVEL_THRESHOLD_MEDIUM:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_verdict(
    email: EmailSignal,
    phone: PhoneSignal,
    ai: AiSignal,
) -> RiskVerdict:
    """
    Compute the fraud-risk verdict from the three signals.

    Each signal is scored independently, the contributions are summed and
    the sum is capped at 100 before the level is classified.

    Returns:
        RiskVerdict with score in [0, 100].
    """
    sub_scores: dict[str, int] = {
        "email": _score_email(email),
        "phone": _score_phone(phone),
        "ai":    _score_ai(ai),
    }

    logger.info("Sub-scores: %s", sub_scores)

    score = min(MAX_SCORE, sum(sub_scores.values()))
    level = classify_level(score)

    logger.info("Risk verdict: score=%d, level=%s", score, level.value)
    return RiskVerdict(score=score, level=level, email=email, phone=phone, ai=ai)
