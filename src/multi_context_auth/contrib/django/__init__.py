"""
Django integration for multi-context-auth.

Provides middleware that resolves the request context and extracts the
token, and view decorators that require a token.
"""

from .middleware import AuthContextMiddleware
from .decorators import (
    require_token,
    require_context,
)

__all__ = [
    "AuthContextMiddleware",
    "require_token",
    "require_context",
]
