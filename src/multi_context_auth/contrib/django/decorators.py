from functools import wraps
from typing import Callable
import logging
from django.http import JsonResponse

from multi_context_auth.config import ExtractionOptions
from multi_context_auth.domain.errors import AuthenticationError
from multi_context_auth.domain.value_objects import ExtractionResult
from multi_context_auth.extractor import extract_token, extract_token_with_context
from multi_context_auth.factory import create_default_options

logger = logging.getLogger(__name__)


def _request_options(request) -> ExtractionOptions:
    options = getattr(request, "auth_options", None)
    if isinstance(options, ExtractionOptions):
        return options
    return create_default_options()


def _unauthorized(error: AuthenticationError) -> JsonResponse:
    return JsonResponse(
        {"error": error.code, "message": error.message, "details": error.details},
        status=401,
    )


def require_token(view_func: Callable) -> Callable:
    """Decorator to require a token (header or cookie) for a view."""

    @wraps(view_func)
    async def wrapper(request, *args, **kwargs):
        extraction = getattr(request, "token_extraction", None)
        if not isinstance(extraction, ExtractionResult):
            extraction = extract_token(request, _request_options(request))
        if not extraction.is_present:
            logger.warning(f"No token found for request to {request.path}")
            return _unauthorized(AuthenticationError())
        return await view_func(request, *args, **kwargs)

    return wrapper


def require_context(expected_context: str) -> Callable:
    """Decorator to require a token scoped to one context."""

    def decorator(view_func: Callable) -> Callable:
        @wraps(view_func)
        async def wrapper(request, *args, **kwargs):
            extraction = extract_token_with_context(
                request, expected_context, _request_options(request)
            )
            if not extraction.is_present:
                logger.warning(
                    f"No {expected_context} token found for request to {request.path}"
                )
                return _unauthorized(
                    AuthenticationError(details={"context": expected_context})
                )
            return await view_func(request, *args, **kwargs)

        return wrapper

    return decorator
