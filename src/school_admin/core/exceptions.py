from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ApiError(DomainError):
    """Raised when the backend reports a failure for a request."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(ApiError):
    """Backend answered 404 for the requested resource."""


class SessionExpiredError(ApiError):
    """Backend rejected the stored token (401 outside the auth endpoints)."""


class ConnectivityError(ApiError):
    """The backend could not be reached at all."""


class DecodeError(ApiError):
    """A backend response did not match the expected shape."""
