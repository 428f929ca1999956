from typing import Optional
import logging
from django.http import HttpRequest, HttpResponse
from django.conf import settings
from dependency_injector.wiring import inject, Provide

from multi_context_auth.config import ExtractionOptions
from multi_context_auth.contrib.dependency_injector import (
    AuthContextContainer,
    resolve_options,
)
from multi_context_auth.context import (
    RequestAuthState,
    set_auth_state,
    reset_auth_state,
)
from multi_context_auth.domain.value_objects import ExtractionResult
from multi_context_auth.extractor import extract_token
from multi_context_auth.resolver import resolve_auth_context

logger = logging.getLogger(__name__)


class AuthContextMiddleware:
    """
    Resolve the auth context and extract the token once per request.

    Sets ``request.auth_context`` and ``request.token_extraction``, and
    ``request.auth_options`` for the decorators.
    Options come from the container when wired, otherwise from
    ``settings.AUTH_CONTEXT_OPTIONS`` or the environment.
    """

    async_capable = True
    sync_capable = False

    @inject
    def __init__(
        self,
        get_response,
        options: Optional[ExtractionOptions] = Provide[
            AuthContextContainer.extraction_options
        ],
    ):
        self.get_response = get_response
        self._options = resolve_options(options)
        self._public_paths = getattr(settings, "AUTH_PUBLIC_PATHS", ["/health"])

    def _is_public(self, path: str) -> bool:
        return any(path.startswith(p) for p in self._public_paths)

    async def __call__(self, request: HttpRequest) -> HttpResponse:
        request.auth_options = self._options
        if self._is_public(request.path):
            request.auth_context = None
            request.token_extraction = ExtractionResult.empty()
            return await self.get_response(request)

        context = resolve_auth_context(request, self._options.context_options())
        extraction = extract_token(request, self._options)
        request.auth_context = context
        request.token_extraction = extraction

        if extraction.is_present:
            logger.debug(
                f"Request token from {extraction.source.value} "
                f"(context={extraction.context or context})"
            )

        state_token = set_auth_state(
            RequestAuthState(context=context, extraction=extraction)
        )
        try:
            return await self.get_response(request)
        finally:
            reset_auth_state(state_token)
