from __future__ import annotations

from typing import Optional, Sequence

from .enums import CoverageCode, VisitStep


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    `errors` holds one `{"field": ..., "message": ...}` entry per failed field
    when the failure comes from payload validation.
    """

    def __init__(self, message: str, *, errors: Optional[Sequence[dict]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class CoverageError(DomainError):
    """Raised when a visitor lacks the ARL/EPS coverage required to enter."""

    def __init__(self, code: CoverageCode, message: str):
        super().__init__(message)
        self.code = code


class PersistenceError(Exception):
    """Raised when the database rejects or fails an operation."""

    def __init__(self, message: str, *, detail: str = "", step: Optional[VisitStep] = None):
        super().__init__(message)
        self.detail = detail
        self.step = step


class IntegrityError(PersistenceError):
    """Raised when a row that must exist inside a unit of work is missing."""


def describe_error(exc: BaseException) -> str:
    """Best-effort underlying message (the driver's own text when it has one)."""
    msg = getattr(exc, "msg", None)
    return str(msg) if msg else str(exc)
