"""Abstract interfaces for the authentication layer.

This module defines the contracts for the two halves of authentication:
where the current access token lives (:class:`TokenStore`) and how it is
turned into HTTP credentials (:class:`AuthProvider`).  It is free of
transport details so that the login flow and the HTTP client can be
tested and swapped independently.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class AuthCredentials:
    """Generic carrier for HTTP authentication material.

    The client applies these credentials to a request without knowing
    which strategy produced them.

    Attributes:
        headers: HTTP headers to add to requests (e.g. ``Authorization``).
    """

    headers: dict[str, str] = field(default_factory=dict)


class TokenStore(ABC):
    """A single slot holding the current access token.

    ``None`` (or an empty string) means logged out.  Only login and logout
    write the slot.  Implementations do no locking: callers that run login
    and logout concurrently must serialize them.
    """

    @abstractmethod
    def get(self) -> str | None:
        """Return the stored token, or ``None`` when logged out."""

    @abstractmethod
    def set(self, token: str | None) -> None:
        """Replace the stored token.

        Args:
            token: The new token.  ``None`` or ``""`` clears the slot.

        Raises:
            OSError: If a persistent store cannot be written.
        """


class AuthProvider(ABC):
    """Abstract base class for authentication strategies.

    Example usage::

        store = FileTokenStore()
        auth = TokenAuth(store)
        client = DesignerNewsClient(user_agent="...", auth=auth)
    """

    @abstractmethod
    def get_credentials(self) -> AuthCredentials:
        """Return the current credentials.

        Returns:
            An :class:`AuthCredentials` instance ready to be applied to a
            request.

        Raises:
            AuthenticationRequiredError: If no valid credentials are
                available.
        """

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Return ``True`` if :meth:`get_credentials` would succeed.

        This method must not raise.
        """
