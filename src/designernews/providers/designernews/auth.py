"""Bearer-token authentication for the Designer News API."""

from designernews.auth.interfaces import AuthCredentials, AuthProvider, TokenStore
from designernews.core.exceptions import AuthenticationRequiredError


class TokenAuth(AuthProvider):
    """Authorizes requests with the token currently held by a store.

    The store is consulted on every call, never cached, so a token written
    by a login is used by the very next request.
    """

    def __init__(self, token_store: TokenStore):
        """Initialise the auth provider.

        Args:
            token_store: The slot holding the current access token.
        """
        self._token_store = token_store

    def get_credentials(self) -> AuthCredentials:
        """Return an ``Authorization: Bearer`` header.

        Raises:
            AuthenticationRequiredError: If no token is stored.
        """
        token = self._token_store.get()
        if not token:
            raise AuthenticationRequiredError(
                "No Designer News access token found. "
                "Run 'designernews auth login'."
            )
        return AuthCredentials(headers={"Authorization": f"Bearer {token}"})

    def is_authenticated(self) -> bool:
        return bool(self._token_store.get())
