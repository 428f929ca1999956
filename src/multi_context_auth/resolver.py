"""
Context resolution.

Resolves the authentication context (customer/vendor/admin) of a request
from, in priority order:

1. the Origin header
2. the Referer (or Referrer) header
3. the X-Auth-Context header, in development mode only

Origins are compared by exact string equality after normalizing the
request URL to scheme://host[:port]. Origin tables are scanned in their
iteration order, so for a dict the first inserted context wins when an
origin is listed under more than one context.
"""

import logging
import re
from types import MappingProxyType
from typing import Any, Callable, Optional, Sequence, Union
from urllib.parse import urlsplit

from multi_context_auth.config import ContextOptions, OriginTable, coerce_options
from multi_context_auth.domain.value_objects import AuthContext
from multi_context_auth.request import RequestView, as_request_view

logger = logging.getLogger(__name__)


DEFAULT_CONTEXT_ORIGINS: OriginTable = MappingProxyType(
    {
        "admin": (
            "https://admin.example.com",
            "http://localhost:4202",
        ),
        "vendor": (
            "https://vendor.example.com",
            "http://localhost:4201",
        ),
        "customer": (
            "https://customer.example.com",
            "https://app.example.com",
            "http://localhost:3000",
            "http://localhost:4200",
        ),
    }
)

VALID_CONTEXTS: tuple[str, ...] = tuple(ctx.value for ctx in AuthContext)

CONTEXT_OVERRIDE_HEADER = "x-auth-context"

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

_TAB_OR_NEWLINE = re.compile(r"[\t\n\r]")
_SCHEME_PREFIX = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):/*")


# ═══════════════════════════════════════════════════════════════
# ORIGIN HELPERS
# ═══════════════════════════════════════════════════════════════


def _whatwg_prepare(url: str) -> str:
    # Browsers drop tab/newline anywhere, treat "\" as "/" and ignore any
    # run of slashes after a special scheme ("https:host", "https:///host").
    cleaned = _TAB_OR_NEWLINE.sub("", url.strip()).replace("\\", "/")
    match = _SCHEME_PREFIX.match(cleaned)
    if match and match.group(1).lower() in _DEFAULT_PORTS:
        return f"{match.group(1)}://{cleaned[match.end():]}"
    return cleaned


def normalize_origin(url: Any) -> Optional[str]:
    """
    Reduce a URL to its origin (scheme://host[:port]).

    Default ports are dropped and scheme/host are lower-cased. Like a
    browser, tabs/newlines are removed, backslashes count as slashes and
    slashes after the scheme are optional (``https:app.example.com``).
    Returns None for anything that does not parse as an absolute
    http(s), ws(s) or ftp URL.
    """
    if not url or not isinstance(url, str):
        return None

    try:
        parts = urlsplit(_whatwg_prepare(url))
        port = parts.port
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    host = parts.hostname
    if scheme not in _DEFAULT_PORTS or not host:
        return None

    if ":" in host:
        host = f"[{host}]"
    if port is None or port == _DEFAULT_PORTS[scheme]:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def _allowed_origins(entry: Union[str, Sequence[str], None]) -> tuple:
    # Values of any other shape match nothing
    if isinstance(entry, str):
        return (entry,)
    if isinstance(entry, (list, tuple)):
        return tuple(origin for origin in entry if isinstance(origin, str))
    return ()


def get_context_from_origin(
    url: Any, origin_table: OriginTable = DEFAULT_CONTEXT_ORIGINS
) -> Optional[str]:
    """Look up the context whose allowed origins contain the URL's origin."""
    request_origin = normalize_origin(url)
    if request_origin is None:
        if url:
            logger.debug("Ignoring unparseable origin/referer value")
        return None

    for context, allowed in origin_table.items():
        if request_origin in _allowed_origins(allowed):
            return context
    return None


def is_origin_allowed_for_context(
    origin: Any,
    context: Any,
    origin_table: OriginTable = DEFAULT_CONTEXT_ORIGINS,
) -> bool:
    """
    Check whether ``origin`` is one of the allowed origins for ``context``.

    Example:
        >>> is_origin_allowed_for_context("https://customer.example.com", "customer")
        True
    """
    if not origin or not context or not isinstance(context, str):
        return False

    allowed = origin_table.get(context)
    if not allowed:
        return False

    request_origin = normalize_origin(origin)
    if request_origin is None:
        return False
    return request_origin in _allowed_origins(allowed)


# ═══════════════════════════════════════════════════════════════
# CONTEXT VALIDATION
# ═══════════════════════════════════════════════════════════════


def get_context_from_type(user_type: Any) -> Optional[str]:
    """Map a user type to its context, or None if it is not a known context."""
    if not user_type or not isinstance(user_type, str):
        return None
    if not is_valid_context_type(user_type):
        return None
    return AuthContext(user_type).value


def get_valid_contexts(
    origin_table: OriginTable = DEFAULT_CONTEXT_ORIGINS,
) -> tuple[str, ...]:
    """Context names configured in an origin table."""
    return tuple(origin_table.keys())


def is_valid_context_type(context: Any) -> bool:
    """Check membership in the fixed customer/vendor/admin set."""
    return isinstance(context, str) and context in VALID_CONTEXTS


# ═══════════════════════════════════════════════════════════════
# RESOLUTION
# ═══════════════════════════════════════════════════════════════


def _from_origin_header(
    view: RequestView, options: ContextOptions, table: OriginTable
) -> Optional[str]:
    return get_context_from_origin(view.header("origin"), table)


def _from_referer_header(
    view: RequestView, options: ContextOptions, table: OriginTable
) -> Optional[str]:
    referer = view.header("referer") or view.header("referrer")
    return get_context_from_origin(referer, table)


def _from_override_header(
    view: RequestView, options: ContextOptions, table: OriginTable
) -> Optional[str]:
    if not options.is_development:
        return None
    custom = view.header(CONTEXT_OVERRIDE_HEADER)
    # Checked against the table, not the fixed set: tables may add contexts
    if custom and custom in table:
        return custom
    return None


ResolutionStrategy = Callable[
    [RequestView, ContextOptions, OriginTable], Optional[str]
]

RESOLUTION_STRATEGIES: tuple[ResolutionStrategy, ...] = (
    _from_origin_header,
    _from_referer_header,
    _from_override_header,
)


def resolve_auth_context(
    request: Any, options: Any = None, **overrides
) -> Optional[str]:
    """
    Resolve the authentication context of a request.

    Args:
        request: Request mapping, Starlette/FastAPI or Django request
        options: ContextOptions, a mapping of option fields, or None
        **overrides: Individual option fields (environment_mode, origin_table)

    Returns:
        The context name, or None when no strategy matches. Never raises
        for malformed input.
    """
    view = as_request_view(request)
    if view is None:
        return None

    opts = coerce_options(options, ContextOptions, **overrides)
    table = opts.origin_table
    if table is None:
        table = DEFAULT_CONTEXT_ORIGINS

    for strategy in RESOLUTION_STRATEGIES:
        context = strategy(view, opts, table)
        if context:
            logger.debug(f"Resolved auth context '{context}' via {strategy.__name__}")
            return context
    return None
