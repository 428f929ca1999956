"""
FastAPI handlers for the auth-context errors.

A missing or out-of-context token becomes a 401 carrying the error code and
the expected context. Bad arguments to the cookie helpers are programming
errors and surface as an opaque 500.
"""

from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from multi_context_auth.domain.errors import (
    AuthDomainError,
    AuthenticationError,
    InvalidArgumentError,
)


def _error_response(
    status_code: int, code: str, message: str, details: Optional[dict] = None
) -> JSONResponse:
    body: dict[str, Any] = {"error": code, "message": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    # details is always present here so clients can read the expected context
    return _error_response(
        status.HTTP_401_UNAUTHORIZED, exc.code, exc.message, exc.details or {}
    )


async def invalid_argument_error_handler(
    request: Request, exc: AuthDomainError
) -> JSONResponse:
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An internal error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the 401/500 mappings for AuthenticationError and InvalidArgumentError."""
    for error_type, handler in (
        (AuthenticationError, authentication_error_handler),
        (InvalidArgumentError, invalid_argument_error_handler),
    ):
        app.add_exception_handler(error_type, handler)
