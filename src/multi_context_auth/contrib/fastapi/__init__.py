"""
FastAPI integration for multi-context-auth.

Provides middleware, dependencies and exception handlers for resolving
the request context and extracting tokens in FastAPI applications.
"""

from .dependencies import (
    get_auth_context,
    get_token_extraction,
    get_optional_token,
    require_token,
    require_context,
)
from .middleware import AuthContextMiddleware
from .exception_handlers import register_exception_handlers

__all__ = [
    "get_auth_context",
    "get_token_extraction",
    "get_optional_token",
    "require_token",
    "require_context",
    "AuthContextMiddleware",
    "register_exception_handlers",
]
