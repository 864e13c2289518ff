"""Service layer that remembers who is logged in."""

import logging
from dataclasses import asdict
from pathlib import Path

from designernews.auth import credentials
from designernews.auth.login import LoginRemoteDataSource
from designernews.core.exceptions import AuthedUserError
from designernews.core.models import User

logger = logging.getLogger(__name__)


class LoginService:
    """Tracks the logged-in user on top of the remote login flow.

    The user returned by a successful login is cached in memory and written
    to ``~/.config/designernews/user.json`` so that :attr:`is_logged_in`
    survives restarts.  Token handling stays with the data source.
    """

    def __init__(
        self,
        remote: LoginRemoteDataSource,
        user_file: Path | None = None,
    ):
        """Initialise the service.

        Args:
            remote: The remote login flow.
            user_file: Override for the stored-user location.
        """
        self.remote = remote
        self._user_file = user_file
        stored = credentials.load_user(user_file)
        self._user: User | None = (
            User.from_dict(stored) if stored and "id" in stored else None
        )

    @property
    def user(self) -> User | None:
        """The logged-in user, or ``None``."""
        return self._user

    @property
    def is_logged_in(self) -> bool:
        return self._user is not None

    async def login(self, username: str, password: str) -> User:
        """Log in and remember the resulting user.

        Raises:
            LoginError: Propagated unchanged from the remote flow.  After an
                :class:`AuthedUserError` the token no longer belongs to the
                previously cached user, so that user is forgotten; after a
                :class:`TokenExchangeError` it is kept.
        """
        try:
            user = await self.remote.login(username, password)
        except AuthedUserError:
            self._user = None
            credentials.clear_user(self._user_file)
            raise
        self._user = user
        credentials.save_user(asdict(user), self._user_file)
        return user

    def logout(self) -> None:
        """Forget the user and clear the token."""
        self._user = None
        credentials.clear_user(self._user_file)
        self.remote.logout()
