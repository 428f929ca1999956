from typing import Optional, List
import logging
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
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
from multi_context_auth.extractor import extract_token
from multi_context_auth.resolver import resolve_auth_context

logger = logging.getLogger(__name__)


class AuthContextMiddleware(BaseHTTPMiddleware):
    """
    Resolve the auth context and extract the token once per request.

    Results are stored on ``request.state.auth_context`` and
    ``request.state.token_extraction`` and published via the
    ``auth_state`` context variable. The options go on
    ``request.state.auth_options`` so dependencies reuse them.
    Tokens are not verified here.
    """

    @inject
    def __init__(
        self,
        app,
        options: Optional[ExtractionOptions] = Provide[
            AuthContextContainer.extraction_options
        ],
        public_paths: Optional[List[str]] = None,
    ):
        super().__init__(app)
        self.options = resolve_options(options)
        self.public_paths = public_paths or ["/health"]

    def _is_public(self, path: str) -> bool:
        return any(path.startswith(p) for p in self.public_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.auth_options = self.options
        if self._is_public(request.url.path):
            return await call_next(request)

        context = resolve_auth_context(request, self.options.context_options())
        extraction = extract_token(request, self.options)
        request.state.auth_context = context
        request.state.token_extraction = extraction

        if extraction.is_present:
            logger.debug(
                f"Request token from {extraction.source.value} "
                f"(context={extraction.context or context})"
            )

        state_token = set_auth_state(
            RequestAuthState(context=context, extraction=extraction)
        )
        try:
            return await call_next(request)
        finally:
            reset_auth_state(state_token)
