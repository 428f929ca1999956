"""
Value objects for context resolution and token extraction.

All of these are transient and request-scoped. Enumerations mix in
``str`` so raw header/cookie strings compare equal to their members.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class AuthContext(str, Enum):
    """
    Tenant/user-type classification of a request.

    Declaration order is the default scan order for context cookies.
    """

    CUSTOMER = "customer"
    VENDOR = "vendor"
    ADMIN = "admin"


class TokenType(str, Enum):
    """Token kinds; used only as a cookie naming component."""

    ACCESS = "access"
    REFRESH = "refresh"
    SIGNUP = "signup"
    OTP = "otp"
    PASSWORD_RESET = "password_reset"


class TokenSource(str, Enum):
    """Where a token was extracted from."""

    HEADER = "header"
    COOKIE = "cookie"


class ContextToken(NamedTuple):
    """Token found by scanning context cookies, with the context it belongs to."""

    token: Optional[str]
    context: Optional[str]


@dataclass(frozen=True)
class ExtractionResult:
    """
    Result of extracting a token from an HTTP request.

    Either all three fields are None (nothing found), or ``token`` and
    ``source`` are set. Header tokens never carry a context.
    """

    token: Optional[str] = None
    source: Optional[TokenSource] = None
    context: Optional[str] = None

    @classmethod
    def empty(cls) -> "ExtractionResult":
        return cls()

    @classmethod
    def from_header(cls, token: str) -> "ExtractionResult":
        return cls(token=token, source=TokenSource.HEADER)

    @classmethod
    def from_cookie(
        cls, token: str, context: Optional[str] = None
    ) -> "ExtractionResult":
        return cls(token=token, source=TokenSource.COOKIE, context=context)

    @property
    def is_present(self) -> bool:
        """Check if a token was found."""
        return self.token is not None

    def as_dict(self) -> dict:
        return {
            "token": self.token,
            "source": self.source.value if self.source else None,
            "context": self.context,
        }
