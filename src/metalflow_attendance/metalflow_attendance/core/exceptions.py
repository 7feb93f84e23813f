from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, *, record_id: Optional[str] = None):
        super().__init__(message)
        self.record_id = record_id

    def __str__(self) -> str:
        message = super().__str__()
        if self.record_id is not None:
            return f"{message} (record {self.record_id})"
        return message


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""
