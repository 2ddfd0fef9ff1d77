"""
src/api/validate.py
====================
API Endpoint — CandidateGuard

Responsibility:
    - Expose POST /api/validate-candidate
    - Decode the JSON body and delegate to src.pipeline.run_validation
    - Map request-level failures onto the fixed error bodies:
        400 {"error": "Email and phone are required"}
        405 {"error": "Method not allowed"}
        500 {"error": "Missing API keys"}
        500 {"error": "Validation failed", "message": <detail>}
    - Expose GET /health

A request either returns a full verdict (200) or an error body, never a
partial result.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.errors import CandidateGuardError
from src.pipeline import run_validation

logger = logging.getLogger("candidateguard.api")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="CandidateGuard",
    description="Candidate fraud-risk scoring from email, phone and resume signals.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"error": "Method not allowed"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/validate-candidate")
async def validate_candidate(request: Request):
    """
    Score one candidate submission.

    Body (JSON):
        candidateEmail (required), candidatePhone (required),
        candidateName, linkedinUrl, resumeText (optional)

    Returns:
        200 with the verdict body, or a 4xx/5xx error body.
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.info("Request body is not valid JSON, treating as empty.")
        payload = None

    try:
        result = await run_validation(payload)
    except CandidateGuardError as exc:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except Exception as exc:
        logger.error("Validation error: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Validation failed", "message": str(exc)},
        )

    logger.info(
        "Validation complete: riskScore=%d, riskLevel=%s",
        result["riskScore"],
        result["riskLevel"],
    )
    return JSONResponse(status_code=200, content=result)
