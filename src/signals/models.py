"""
src/signals/models.py
======================
Signal Definitions — CandidateGuard

Responsibility:
    - Define typed structures for the three signals consumed by the scorer
    - Define the conservative default each signal collapses to on failure

This module does NOT:
    - Call any external API
    - Compute risk scores (that is src/risk/scorer.py)
"""

from dataclasses import dataclass
from enum import Enum


class LineType(str, Enum):
    """Phone line type classification."""

    VOIP = "voip"
    OTHER = "other"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class EmailSignal:
    """Email reputation: format validity and disposable-domain flag."""

    valid_format: bool
    disposable: bool


@dataclass(frozen=True)
class PhoneSignal:
    """Phone reputation: validity and line type."""

    valid: bool
    line_type: LineType

    @property
    def is_voip(self) -> bool:
        return self.line_type is LineType.VOIP


@dataclass(frozen=True)
class AiSignal:
    """AI-authorship estimate for the resume text."""

    probability: int
    reasoning: str


# ---------------------------------------------------------------------------
# Conservative defaults, substituted when a collector fails
# ---------------------------------------------------------------------------

DEFAULT_EMAIL_SIGNAL = EmailSignal(valid_format=False, disposable=True)
DEFAULT_PHONE_SIGNAL = PhoneSignal(valid=False, line_type=LineType.UNKNOWN)
DEFAULT_AI_SIGNAL = AiSignal(
    probability=0,
    reasoning="Resume analysis unavailable at this time.",
)

NO_RESUME_TEXT_REASONING = "No resume text provided for analysis."
