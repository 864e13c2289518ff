"""Remote login flow: token exchange followed by the authenticated-user fetch.

Login is two sequential remote calls.  The first exchanges the user's
credentials (plus the application's client identity) for an access token;
the token is written to the :class:`~designernews.auth.interfaces.TokenStore`
before the second call is issued, so the transport authorizes the
``/me`` request with it.

Every failure is terminal for that login attempt and is reported as a
:class:`~designernews.core.exceptions.LoginError`.  Nothing is retried.

Concurrent login/logout sequences on the same store are not coordinated
here; callers must serialize them.
"""

import asyncio
import logging
from collections.abc import Callable

import requests

from designernews.auth.interfaces import TokenStore
from designernews.core.exceptions import AuthedUserError, LoginError, TokenExchangeError
from designernews.core.interfaces import DesignerNewsService
from designernews.core.models import ClientIdentity, User

logger = logging.getLogger(__name__)

# Failures raised by a request that never produced a response.
_TRANSPORT_ERRORS = (requests.RequestException, OSError)


def build_login_params(
    identity: ClientIdentity, username: str, password: str
) -> dict[str, str]:
    """Return the form parameters for the password grant.

    Args:
        identity: The application's OAuth client credentials.
        username: The user's login name.
        password: The user's password.

    Returns:
        A dictionary with ``client_id``, ``client_secret``, ``grant_type``,
        ``username`` and ``password`` entries.
    """
    return {
        "client_id": identity.client_id,
        "client_secret": identity.client_secret,
        "grant_type": "password",
        "username": username,
        "password": password,
    }


class LoginRemoteDataSource:
    """Knows which remote calls make up a login and keeps the token current.

    Args:
        token_store: Slot receiving the access token on exchange success.
        service: Transport for the two remote operations.
        identity: The application's OAuth client credentials.
        clear_token_on_user_error: When ``True``, a failed user fetch clears
            the token written by the exchange.  Defaults to ``False``: the
            token stays set even though login reports failure.
    """

    def __init__(
        self,
        token_store: TokenStore,
        service: DesignerNewsService,
        identity: ClientIdentity,
        clear_token_on_user_error: bool = False,
    ):
        self.token_store = token_store
        self.service = service
        self.identity = identity
        self.clear_token_on_user_error = clear_token_on_user_error

    def logout(self) -> None:
        """Log out by clearing the stored token.  Never fails."""
        self.token_store.set(None)
        logger.info("Logged out")

    async def login(self, username: str, password: str) -> User:
        """Exchange credentials for a token, then fetch the authed user.

        Args:
            username: The user's login name.
            password: The user's password.

        Returns:
            The first profile returned for the new token.

        Raises:
            TokenExchangeError: If the exchange failed in transport, was
                rejected, or returned no body (the token store is untouched),
                or if the token store could not be written.  No user fetch
                is issued in either case.
            AuthedUserError: If the user fetch failed.  The new token stays
                stored unless ``clear_token_on_user_error`` is set.
        """
        params = build_login_params(self.identity, username, password)
        logger.debug("Requesting access token for %s", username)
        try:
            response = await self.service.login(params)
        except _TRANSPORT_ERRORS as e:
            logger.warning("Access token request failed: %s", e)
            raise TokenExchangeError(
                f"Access token retrieval failed with {e}"
            ) from e

        if not response.is_successful or response.body is None:
            logger.warning(
                "Access token request rejected (HTTP %s)", response.status_code
            )
            raise TokenExchangeError("Access token retrieval failed")

        try:
            self.token_store.set(response.body.access_token)
        except OSError as e:
            logger.warning("Access token could not be stored: %s", e)
            raise TokenExchangeError(f"Failed to store access token: {e}") from e
        logger.debug("Access token stored")

        try:
            user = await self.request_user()
        except AuthedUserError:
            if self.clear_token_on_user_error:
                try:
                    self.token_store.set(None)
                except OSError as e:
                    logger.warning("Access token could not be cleared: %s", e)
            raise

        logger.info("Logged in as user %s", user.id)
        return user

    async def request_user(self) -> User:
        """Fetch the profile bound to the currently stored token.

        Returns:
            The first profile in the response.  Any further profiles are
            discarded.

        Raises:
            AuthedUserError: On transport failure, a non-2xx response, or
                an absent or empty profile list.
        """
        try:
            response = await self.service.get_authed_user()
        except _TRANSPORT_ERRORS as e:
            logger.warning("Authed user request failed: %s", e)
            raise AuthedUserError(f"Failed to get authed user {e}") from e

        if not response.is_successful or not response.body:
            logger.warning(
                "Authed user request rejected (HTTP %s)", response.status_code
            )
            raise AuthedUserError("Failed to get user")

        return response.body[0]

    def login_in_background(
        self,
        username: str,
        password: str,
        on_success: Callable[[User], None],
        on_error: Callable[[str], None],
    ) -> asyncio.Task:
        """Schedule :meth:`login` and report its outcome through callbacks.

        Exactly one of ``on_success`` / ``on_error`` is invoked, exactly
        once.  An exception raised inside ``on_success`` propagates out of
        the task and is never reported through ``on_error``.  There is no
        cancellation: a caller that loses interest should ignore the
        callback.

        Must be called while an event loop is running.

        Args:
            username: The user's login name.
            password: The user's password.
            on_success: Receives the authenticated :class:`User`.
            on_error: Receives the failure message.

        Returns:
            The scheduled :class:`asyncio.Task`.
        """

        async def _run() -> None:
            try:
                user = await self.login(username, password)
            except LoginError as e:
                on_error(str(e))
            else:
                on_success(user)

        return asyncio.get_running_loop().create_task(_run())
