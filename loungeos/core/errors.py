"""Error types for LoungeOS.

Defines a small hierarchy of exceptions raised by repositories and services to
signal missing records, invalid operations and conflicts. Each error carries
the HTTP status the API layer answers with.
"""

from __future__ import annotations

from typing import Any, Optional


class LoungeOSError(Exception):
    """Base error for all LoungeOS domain exceptions.

    Args:
        message: Human-readable error description.
        details: Optional structured context for diagnosis.
    """

    status_code: int = 400

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(LoungeOSError):
    """Raised when a referenced record does not exist."""

    status_code = 404

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class InvalidOperationError(LoungeOSError):
    """Raised when a request is well-formed but violates a business rule."""

    status_code = 400


class ConflictError(LoungeOSError):
    """Raised on uniqueness violations and illegal state transitions."""

    status_code = 409


class AuthenticationError(LoungeOSError):
    """Raised when credentials do not match."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)
