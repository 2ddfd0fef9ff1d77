"""
src/signals/result.py
======================
Collector Result — CandidateGuard

A collector either produced its signal or it did not. SignalResult records
which, and the pipeline collapses a failure into the signal's conservative
default via value_or() just before scoring.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SignalResult(Generic[T]):
    """Outcome of one signal collector."""

    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> "SignalResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "SignalResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        """Return the collected signal, or *default* if collection failed."""
        if self.ok and self.value is not None:
            return self.value
        return default
