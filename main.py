"""
main.py
========
CandidateGuard service runner.

Scores job candidates for fraud risk from email, phone and resume signals.
The FastAPI app lives in src/api/validate.py; this module only prepares
the environment and logging before importing it.

Run with:
    uvicorn main:app --reload
"""

import logging

from dotenv import load_dotenv

# API keys and endpoint overrides are read from .env (see src/config.py)
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Upstream request URLs carry the reputation-service API key as a query
# parameter; keep client transport logs quiet so it never reaches the log.
_QUIET_LOGGERS = (
    "openai",
    "httpx",
    "httpcore",
    "aiohttp.client",
    "aiohttp.access",
)
for _name in _QUIET_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

from src.api.validate import app  # noqa: F401, E402

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000)
