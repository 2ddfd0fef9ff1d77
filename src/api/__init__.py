# src/api/__init__.py
# =====================
# API Layer — CandidateGuard
#
# Responsibility:
#   - Expose POST /api/validate-candidate (JSON body)
#   - Map request-level errors to fixed JSON error bodies
#   - Expose GET /health
