"""
Domain errors for context resolution and token extraction.

Misses are never errors: every lookup returns an absent marker instead.
These classes cover programmer misuse and the integrations' "token
required" responses.
"""

from typing import Optional, Any


class AuthDomainError(Exception):
    """Base class for all auth domain errors."""

    def __init__(
        self,
        message: str,
        code: str = "AUTH_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class InvalidArgumentError(AuthDomainError, ValueError):
    """Raised when a naming helper receives an empty or non-string argument."""

    def __init__(
        self,
        message: str = "Invalid argument",
        code: str = "INVALID_ARGUMENT",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class AuthenticationError(AuthDomainError):
    """Raised when a route requires a token and none could be extracted."""

    def __init__(
        self,
        message: str = "Authentication required",
        code: str = "AUTHENTICATION_FAILED",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
