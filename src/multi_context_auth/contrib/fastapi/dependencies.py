from typing import Optional, Callable
import logging
from fastapi import Request

from multi_context_auth.config import ExtractionOptions
from multi_context_auth.domain.errors import AuthenticationError
from multi_context_auth.domain.value_objects import ExtractionResult
from multi_context_auth.extractor import extract_token, extract_token_with_context
from multi_context_auth.factory import create_default_options
from multi_context_auth.resolver import resolve_auth_context

logger = logging.getLogger(__name__)


def _request_options(request: Request) -> ExtractionOptions:
    # Set by AuthContextMiddleware; defaults apply only without it
    options = getattr(request.state, "auth_options", None)
    if isinstance(options, ExtractionOptions):
        return options
    return create_default_options()


def get_auth_context(request: Request) -> Optional[str]:
    """Resolved context, reusing the middleware result when available."""
    if hasattr(request.state, "auth_context"):
        return request.state.auth_context
    return resolve_auth_context(request, _request_options(request).context_options())


def get_token_extraction(request: Request) -> ExtractionResult:
    """Token extraction, reusing the middleware result when available."""
    extraction = getattr(request.state, "token_extraction", None)
    if isinstance(extraction, ExtractionResult):
        return extraction
    return extract_token(request, _request_options(request))


async def get_optional_token(request: Request) -> Optional[str]:
    """Get access token from request (header or cookie)."""
    return get_token_extraction(request).token


async def require_token(request: Request) -> ExtractionResult:
    """Dependency that requires a token to be present."""
    extraction = get_token_extraction(request)
    if not extraction.is_present:
        logger.warning(f"No token found for request to {request.url.path}")
        raise AuthenticationError()
    return extraction


def require_context(expected_context: str) -> Callable:
    """
    Factory for a dependency that requires a token scoped to one context.

    Cookies of other contexts are ignored; a Bearer header is accepted.
    """

    async def dependency(request: Request) -> ExtractionResult:
        extraction = extract_token_with_context(
            request, expected_context, _request_options(request)
        )
        if not extraction.is_present:
            logger.warning(
                f"No {expected_context} token found for request to {request.url.path}"
            )
            raise AuthenticationError(details={"context": expected_context})
        return extraction

    return dependency
