"""
Framework-agnostic read-only view over an HTTP request.

Accepts plain mappings (``{"headers": {...}, "cookies": {...}}``),
Starlette/FastAPI requests (``.headers`` / ``.cookies``) and Django
requests (``.headers`` / ``.COOKIES``).
"""

from collections.abc import Mapping
from typing import Any, Optional

_NON_REQUEST_TYPES = (str, bytes, bytearray, int, float, bool)


class RequestView:
    """
    Case-insensitive header access and exact-name cookie access.

    Non-string header or cookie values read as absent.
    """

    __slots__ = ("_headers", "_cookies")

    def __init__(self, headers: Any = None, cookies: Any = None):
        self._headers = _lower_keys(headers)
        self._cookies = cookies if isinstance(cookies, Mapping) else None

    @property
    def has_cookies(self) -> bool:
        return self._cookies is not None

    def header(self, name: str) -> Optional[str]:
        value = self._headers.get(name.lower())
        return value if isinstance(value, str) else None

    def cookie(self, name: str) -> Optional[str]:
        if self._cookies is None:
            return None
        value = self._cookies.get(name)
        return value if isinstance(value, str) else None


def _lower_keys(headers: Any) -> dict:
    if not isinstance(headers, Mapping):
        return {}
    return {str(k).lower(): v for k, v in headers.items()}


def as_request_view(request: Any) -> Optional[RequestView]:
    """
    Adapt a host request to a RequestView.

    Returns None for values that are not requests at all (None, strings,
    numbers); every public operation treats that as "nothing found".
    """
    if isinstance(request, RequestView):
        return request
    if request is None or isinstance(request, _NON_REQUEST_TYPES):
        return None

    headers = getattr(request, "headers", None)
    # Django exposes cookies as COOKIES, Starlette as cookies
    cookies = getattr(request, "COOKIES", None)
    if cookies is None:
        cookies = getattr(request, "cookies", None)

    # Starlette requests are themselves Mappings over the ASGI scope,
    # so attribute access has to win over item access.
    if headers is None and cookies is None and isinstance(request, Mapping):
        return RequestView(request.get("headers"), request.get("cookies"))
    return RequestView(headers, cookies)
