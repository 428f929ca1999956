"""
Context-scoped cookie utilities.

Cookies follow the naming pattern ``{context}_{token_type}_token``,
e.g. ``customer_access_token`` or ``vendor_refresh_token``.
"""

import logging
from enum import Enum
from typing import Any, Optional, Sequence

from multi_context_auth.domain.errors import InvalidArgumentError
from multi_context_auth.domain.value_objects import ContextToken, TokenType
from multi_context_auth.request import as_request_view
from multi_context_auth.resolver import VALID_CONTEXTS

logger = logging.getLogger(__name__)


VALID_TOKEN_TYPES: tuple[str, ...] = tuple(t.value for t in TokenType)

DEFAULT_TOKEN_TYPES: tuple[str, ...] = (
    TokenType.ACCESS.value,
    TokenType.REFRESH.value,
)


def _name_part(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def get_cookie_name(context: Any, token_type: Any = "access") -> str:
    """
    Build the cookie name for a context and token type.

    Raises:
        InvalidArgumentError: If either argument is not a non-empty string.

    Example:
        >>> get_cookie_name("vendor", "refresh")
        'vendor_refresh_token'
    """
    context = _name_part(context)
    token_type = _name_part(token_type)

    if not context or not isinstance(context, str):
        raise InvalidArgumentError(
            "Context must be a non-empty string", details={"argument": "context"}
        )
    if not token_type or not isinstance(token_type, str):
        raise InvalidArgumentError(
            "Token type must be a non-empty string",
            details={"argument": "token_type"},
        )

    return f"{context}_{token_type}_token"


def extract_context_token(
    request: Any, context: Any, token_type: Any = "access"
) -> Optional[str]:
    """
    Read the token cookie for a specific context.

    Returns None unless ``context`` is one of customer/vendor/admin and the
    request carries a non-empty cookie under the computed name.
    """
    view = as_request_view(request)
    if view is None or not view.has_cookies:
        return None

    context = _name_part(context)
    if not context or not isinstance(context, str) or context not in VALID_CONTEXTS:
        return None

    return view.cookie(get_cookie_name(context, token_type)) or None


def extract_token_from_all_contexts(
    request: Any,
    token_type: Any = "access",
    contexts: Sequence[Any] = VALID_CONTEXTS,
) -> ContextToken:
    """
    Scan context cookies in order and return the first token found.

    Contexts outside customer/vendor/admin are skipped. Order matters:
    pass an explicit ``contexts`` sequence when a particular context must
    win when several cookies are present.

    Returns:
        ContextToken(token, context), or ContextToken(None, None).
    """
    view = as_request_view(request)
    if view is None or not view.has_cookies:
        return ContextToken(None, None)

    if isinstance(contexts, (list, tuple)):
        candidates = [
            _name_part(ctx) for ctx in contexts if _name_part(ctx) in VALID_CONTEXTS
        ]
    else:
        candidates = list(VALID_CONTEXTS)

    for context in candidates:
        token = extract_context_token(view, context, token_type)
        if token:
            logger.debug(f"Found token in {get_cookie_name(context, token_type)}")
            return ContextToken(token, context)

    return ContextToken(None, None)


def extract_context_tokens(
    request: Any,
    context: Any,
    token_types: Sequence[Any] = DEFAULT_TOKEN_TYPES,
) -> dict[str, Optional[str]]:
    """
    Extract several token types for one context.

    Example:
        >>> extract_context_tokens(req, "customer")
        {'access': '...', 'refresh': None}
    """
    if as_request_view(request) is None:
        return {}

    context = _name_part(context)
    if not context or not isinstance(context, str):
        return {}
    if not isinstance(token_types, (list, tuple)):
        return {}

    tokens = {}
    for token_type in token_types:
        token_type = _name_part(token_type)
        if token_type and isinstance(token_type, str):
            tokens[token_type] = extract_context_token(request, context, token_type)
    return tokens


def is_valid_token_type(token_type: Any) -> bool:
    return isinstance(token_type, str) and token_type in VALID_TOKEN_TYPES


def get_valid_token_types() -> tuple[str, ...]:
    return VALID_TOKEN_TYPES
