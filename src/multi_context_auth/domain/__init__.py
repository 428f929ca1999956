"""Domain layer for context-scoped authentication."""

from multi_context_auth.domain.value_objects import (
    AuthContext,
    TokenType,
    TokenSource,
    ContextToken,
    ExtractionResult,
)
from multi_context_auth.domain.errors import (
    AuthDomainError,
    InvalidArgumentError,
    AuthenticationError,
)

__all__ = [
    # Value objects
    "AuthContext",
    "TokenType",
    "TokenSource",
    "ContextToken",
    "ExtractionResult",
    # Errors
    "AuthDomainError",
    "InvalidArgumentError",
    "AuthenticationError",
]
