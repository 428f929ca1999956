"""
py-multi-context-auth: context-scoped authentication utilities.

Resolves the request context (customer/vendor/admin) from Origin/Referer
headers and extracts the matching token from the Authorization header or
context-scoped cookies (``{context}_{token_type}_token``).

Tokens are never verified here; hand ``ExtractionResult.token`` to your
JWT/identity provider.
"""

__version__ = "0.1.0"

from multi_context_auth.domain import (
    AuthContext,
    TokenType,
    TokenSource,
    ContextToken,
    ExtractionResult,
    AuthDomainError,
    InvalidArgumentError,
    AuthenticationError,
)
from multi_context_auth.config import (
    ContextOptions,
    ExtractionOptions,
    coerce_options,
)
from multi_context_auth.request import RequestView, as_request_view
from multi_context_auth.resolver import (
    DEFAULT_CONTEXT_ORIGINS,
    VALID_CONTEXTS,
    normalize_origin,
    resolve_auth_context,
    get_context_from_origin,
    get_context_from_type,
    is_origin_allowed_for_context,
    get_valid_contexts,
    is_valid_context_type,
)
from multi_context_auth.cookies import (
    VALID_TOKEN_TYPES,
    get_cookie_name,
    extract_context_token,
    extract_token_from_all_contexts,
    extract_context_tokens,
    is_valid_token_type,
    get_valid_token_types,
)
from multi_context_auth.extractor import (
    LEGACY_COOKIE_FORMATS,
    extract_bearer_token,
    extract_token,
    extract_token_with_context,
)
from multi_context_auth.context import (
    RequestAuthState,
    auth_state,
    get_auth_context,
    get_extraction,
    get_token,
)
from multi_context_auth.factory import create_default_options

# Convenience aliases
get_auth_token = extract_token
get_context = resolve_auth_context
get_context_token = extract_context_token
get_all_context_tokens = extract_token_from_all_contexts
get_context_cookie_name = get_cookie_name
map_type_to_context = get_context_from_type
is_valid_context = is_valid_context_type
validate_origin = is_origin_allowed_for_context

__all__ = [
    # Version
    "__version__",
    # Domain
    "AuthContext",
    "TokenType",
    "TokenSource",
    "ContextToken",
    "ExtractionResult",
    "AuthDomainError",
    "InvalidArgumentError",
    "AuthenticationError",
    # Configuration
    "ContextOptions",
    "ExtractionOptions",
    "coerce_options",
    "create_default_options",
    # Request
    "RequestView",
    "as_request_view",
    # Context resolution
    "DEFAULT_CONTEXT_ORIGINS",
    "VALID_CONTEXTS",
    "normalize_origin",
    "resolve_auth_context",
    "get_context_from_origin",
    "get_context_from_type",
    "is_origin_allowed_for_context",
    "get_valid_contexts",
    "is_valid_context_type",
    # Cookies
    "VALID_TOKEN_TYPES",
    "get_cookie_name",
    "extract_context_token",
    "extract_token_from_all_contexts",
    "extract_context_tokens",
    "is_valid_token_type",
    "get_valid_token_types",
    # Token extraction
    "LEGACY_COOKIE_FORMATS",
    "extract_bearer_token",
    "extract_token",
    "extract_token_with_context",
    # Request-scoped state
    "RequestAuthState",
    "auth_state",
    "get_auth_context",
    "get_extraction",
    "get_token",
    # Aliases
    "get_auth_token",
    "get_context",
    "get_context_token",
    "get_all_context_tokens",
    "get_context_cookie_name",
    "map_type_to_context",
    "is_valid_context",
    "validate_origin",
]
