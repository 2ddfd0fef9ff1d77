"""
src/risk/formatter.py
======================
Response Formatter — CandidateGuard

Projects a RiskVerdict (plus the echoed candidate fields) onto the fixed
200 response body. No scoring happens here.
"""

from typing import Any

from src.risk.scorer import RiskVerdict
from src.submission import CandidateSubmission

# AI probability above which the details line flags "Possible AI"
AI_DETAILS_FLAG_THRESHOLD: int = 50

EMAIL_STATUS_VALID = "Valid email format"
EMAIL_STATUS_INVALID = "Invalid email format"
PHONE_STATUS_VALID = "Valid phone"
PHONE_STATUS_VOIP = "VoIP/Suspicious"
PHONE_STATUS_INVALID = "Invalid phone"


def _phone_status(verdict: RiskVerdict) -> str:
    if not verdict.phone.valid:
        return PHONE_STATUS_INVALID
    if verdict.phone.is_voip:
        return PHONE_STATUS_VOIP
    return PHONE_STATUS_VALID


def _check(flag: bool) -> str:
    return "✓" if flag else "✗"


def _details_line(verdict: RiskVerdict) -> str:
    if verdict.ai.probability > AI_DETAILS_FLAG_THRESHOLD:
        ai_part = "⚠️ Possible AI"
    else:
        ai_part = "✓ Human-written"
    return (
        f"Email: {_check(verdict.email.valid_format)} | "
        f"Phone: {_check(verdict.phone.valid)} | "
        f"AI Resume: {ai_part}"
    )


def format_verdict(
    submission: CandidateSubmission,
    verdict: RiskVerdict,
) -> dict[str, Any]:
    """
    Build the success response body.

    Returns:
        {
            "success": True,
            "candidateName": str | None,
            "candidateEmail": str,
            "riskScore": int,
            "riskLevel": "Low" | "Medium" | "High" | "Critical",
            "emailStatus": str,
            "emailValid": bool,
            "phoneStatus": str,
            "phoneValid": bool,      # valid AND not VoIP
            "aiAnalysis": str,
            "details": str,
        }
    """
    return {
        "success": True,
        "candidateName": submission.name,
        "candidateEmail": submission.email,
        "riskScore": verdict.score,
        "riskLevel": verdict.level.value,
        "emailStatus": (
            EMAIL_STATUS_VALID if verdict.email.valid_format else EMAIL_STATUS_INVALID
        ),
        "emailValid": verdict.email.valid_format,
        "phoneStatus": _phone_status(verdict),
        "phoneValid": verdict.phone.valid and not verdict.phone.is_voip,
        "aiAnalysis": verdict.ai.reasoning,
        "details": _details_line(verdict),
    }
