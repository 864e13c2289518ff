"""Data model dataclasses shared across the library."""

from dataclasses import dataclass, fields
from typing import Any


# ----------------------
# Client identity
# ----------------------


@dataclass(frozen=True)
class ClientIdentity:
    """OAuth client credentials issued to this application.

    These are deployment constants, not user data.
    """

    client_id: str
    client_secret: str


# ----------------------
# Access token
# ----------------------


@dataclass
class AccessToken:
    """Bearer credential returned by the token exchange."""

    access_token: str


# ----------------------
# User
# ----------------------


@dataclass
class User:
    """Represents a Designer News user profile."""

    id: int
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    portrait_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Build a user from an API payload, ignoring unknown fields.

        Args:
            data: A single user object as returned by the service.

        Returns:
            A :class:`User` instance.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


# ----------------------
# Api response
# ----------------------


@dataclass
class ApiResponse:
    """Structured result of a remote call that reached the server."""

    status_code: int
    body: Any = None
    """Parsed payload, or ``None`` when the response carried no body."""

    @property
    def is_successful(self) -> bool:
        """``True`` for any 2xx status code."""
        return 200 <= self.status_code < 300
