"""Abstract interface for the Designer News remote service."""

from abc import ABC, abstractmethod

from designernews.core.models import ApiResponse


class DesignerNewsService(ABC):
    """Abstract base class for the two remote operations used by login.

    Implementations own the transport (HTTP session, serialization,
    authorization headers).  Both operations are coroutines: they must not
    block the event loop while the request is in flight.

    A request that reaches the server returns an :class:`ApiResponse`,
    whatever its status code.  A request that never completes (connection
    error, timeout, undecodable payload) raises instead.
    """

    @abstractmethod
    async def login(self, params: dict[str, str]) -> ApiResponse:
        """Exchange login parameters for an access token.

        Args:
            params: The form parameters built by
                :func:`~designernews.auth.login.build_login_params`.

        Returns:
            An :class:`ApiResponse` whose ``body`` is an
            :class:`~designernews.core.models.AccessToken` on success.

        Raises:
            requests.RequestException: On transport failure.
        """

    @abstractmethod
    async def get_authed_user(self) -> ApiResponse:
        """Return the profiles bound to the currently stored token.

        Authorization is implicit: the implementation reads the token store
        when the request is issued.

        Returns:
            An :class:`ApiResponse` whose ``body`` is a list of
            :class:`~designernews.core.models.User` on success.

        Raises:
            requests.RequestException: On transport failure.
        """
