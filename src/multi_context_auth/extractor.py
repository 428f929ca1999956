"""
Token extraction with context awareness.

Tries multiple sources in priority order:
1. Bearer token (Authorization header) - highest priority
2. Context-specific cookie (if the context resolves)
3. All context cookies (customer, vendor, admin)
4. Legacy generic cookies (backward compatibility)
"""

import logging
from typing import Any, Callable, Optional

from multi_context_auth.config import ExtractionOptions, coerce_options
from multi_context_auth.cookies import (
    extract_context_token,
    extract_token_from_all_contexts,
)
from multi_context_auth.domain.value_objects import ExtractionResult
from multi_context_auth.request import RequestView, as_request_view
from multi_context_auth.resolver import resolve_auth_context

logger = logging.getLogger(__name__)


BEARER_PREFIX = "Bearer "

LEGACY_COOKIE_FORMATS: tuple[str, ...] = (
    "{token_type}Token",
    "{token_type}",
    "{token_type}_token",
    "accessToken",
    "access_token",
)


def extract_bearer_token(authorization: Any) -> Optional[str]:
    """
    Take the token from an ``Authorization: Bearer <token>`` value.

    The prefix match is case-sensitive. Returns None when the header is
    missing, uses another scheme, or carries only whitespace.
    """
    if not isinstance(authorization, str) or not authorization.startswith(
        BEARER_PREFIX
    ):
        return None
    return authorization[len(BEARER_PREFIX) :].strip() or None


def legacy_cookie_names(token_type: str) -> list[str]:
    return [fmt.format(token_type=token_type) for fmt in LEGACY_COOKIE_FORMATS]


# ═══════════════════════════════════════════════════════════════
# STRATEGIES
# ═══════════════════════════════════════════════════════════════


def _bearer_header(
    view: RequestView, options: ExtractionOptions
) -> Optional[ExtractionResult]:
    token = extract_bearer_token(view.header("authorization"))
    if token:
        return ExtractionResult.from_header(token)
    return None


def _context_cookie(
    view: RequestView, options: ExtractionOptions
) -> Optional[ExtractionResult]:
    if not options.prefer_context:
        return None
    context = resolve_auth_context(view, options.context_options())
    if not context:
        return None
    token = extract_context_token(view, context, options.token_type)
    if token:
        return ExtractionResult.from_cookie(token, context)
    return None


def _any_context_cookie(
    view: RequestView, options: ExtractionOptions
) -> Optional[ExtractionResult]:
    token, context = extract_token_from_all_contexts(view, options.token_type)
    if token:
        return ExtractionResult.from_cookie(token, context)
    return None


def _legacy_cookie(
    view: RequestView, options: ExtractionOptions
) -> Optional[ExtractionResult]:
    for name in legacy_cookie_names(options.token_type):
        token = view.cookie(name)
        if token:
            return ExtractionResult.from_cookie(token)
    return None


ExtractionStrategy = Callable[
    [RequestView, ExtractionOptions], Optional[ExtractionResult]
]

EXTRACTION_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    _bearer_header,
    _context_cookie,
    _any_context_cookie,
    _legacy_cookie,
)


# ═══════════════════════════════════════════════════════════════
# PUBLIC API
# ═══════════════════════════════════════════════════════════════


def extract_token(request: Any, options: Any = None, **overrides) -> ExtractionResult:
    """
    Extract the authentication token from a request.

    Args:
        request: Request mapping, Starlette/FastAPI or Django request
        options: ExtractionOptions, a mapping of option fields, or None
        **overrides: Individual option fields (prefer_context, token_type,
            environment_mode, origin_table)

    Returns:
        ExtractionResult; all fields None when nothing was found.

    Example:
        result = extract_token(request, token_type="refresh")
        if result.is_present:
            claims = verify(result.token)
    """
    view = as_request_view(request)
    if view is None:
        return ExtractionResult.empty()

    opts = coerce_options(options, ExtractionOptions, **overrides)

    for strategy in EXTRACTION_STRATEGIES:
        result = strategy(view, opts)
        if result is not None:
            logger.debug(
                f"Extracted {opts.token_type} token from {result.source.value} "
                f"via {strategy.__name__} (context={result.context})"
            )
            return result

    return ExtractionResult.empty()


def extract_token_with_context(
    request: Any, expected_context: Any, options: Any = None, **overrides
) -> ExtractionResult:
    """
    Extract a token while enforcing context isolation.

    Only the expected context's cookie is considered; cookies of other
    contexts are never returned. A Bearer header is still accepted since
    header tokens carry no context.
    """
    if not expected_context or not isinstance(expected_context, str):
        return ExtractionResult.empty()

    view = as_request_view(request)
    if view is None:
        return ExtractionResult.empty()

    opts = coerce_options(options, ExtractionOptions, **overrides)
    expected = getattr(expected_context, "value", expected_context)

    token = extract_context_token(view, expected, opts.token_type)
    if token:
        return ExtractionResult.from_cookie(token, expected)

    result = _bearer_header(view, opts)
    if result is not None:
        return result

    return ExtractionResult.empty()
