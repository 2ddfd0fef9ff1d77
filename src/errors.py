"""
src/errors.py
==============
Request-level Errors — CandidateGuard

Responsibility:
    - Define the fatal error types that abort a validation request
    - Carry the HTTP status code each error maps to

Per-signal failures are NOT represented here. Collectors never raise;
they return a failed SignalResult instead (see src/signals/result.py).
"""


class CandidateGuardError(Exception):
    """Base class for request-level failures surfaced to the caller."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRequestError(CandidateGuardError):
    """Raised when a submission is missing its required fields."""

    status_code = 400


class MissingCredentialsError(CandidateGuardError):
    """Raised when one or more upstream API keys are not configured."""

    status_code = 500

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__("Missing API keys")
