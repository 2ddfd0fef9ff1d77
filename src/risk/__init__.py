# src/risk/__init__.py
# =====================
# Risk Aggregation — CandidateGuard
#
# Responsibility:
#   - Combine the email, phone and AI-authorship signals into a 0–100
#     fraud-risk score with a fixed additive rubric
#   - Classify the risk level (Low | Medium | High | Critical)
#   - Project the verdict onto the response body
#
# Public API:
#   - compute_verdict(): deterministic risk scoring
#   - format_verdict():  response body assembly

from src.risk.scorer import RiskLevel, RiskVerdict, compute_verdict  # noqa: F401
from src.risk.formatter import format_verdict  # noqa: F401
