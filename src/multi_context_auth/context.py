"""
Request-scoped auth state.

Uses contextvars so framework middleware can publish the resolved context
and extracted token to code that has no access to the request object.
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from typing import Optional

from multi_context_auth.domain.value_objects import ExtractionResult


@dataclass(frozen=True)
class RequestAuthState:
    """Context and token extraction computed once per request."""

    context: Optional[str] = None
    extraction: ExtractionResult = field(default_factory=ExtractionResult.empty)


# Global context variable for request-scoped data
auth_state: ContextVar[Optional[RequestAuthState]] = ContextVar(
    "auth_state", default=None
)


def set_auth_state(state: Optional[RequestAuthState]) -> Token:
    return auth_state.set(state)


def reset_auth_state(token: Token) -> None:
    auth_state.reset(token)


def get_auth_context() -> Optional[str]:
    """
    Get the resolved context of the current request.

    Returns None if no middleware has set the state.
    """
    state = auth_state.get()
    return state.context if state else None


def get_extraction() -> ExtractionResult:
    """Get the token extraction of the current request (all-absent if unset)."""
    state = auth_state.get()
    return state.extraction if state else ExtractionResult.empty()


def get_token() -> Optional[str]:
    return get_extraction().token
