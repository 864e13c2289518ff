"""Designer News provider backed by the public v2 API."""

import asyncio
import logging

import requests

from designernews.auth.interfaces import AuthProvider
from designernews.core.interfaces import DesignerNewsService
from designernews.core.models import AccessToken, ApiResponse, User

logger = logging.getLogger(__name__)


class DesignerNewsClient(DesignerNewsService):
    """HTTP transport for the Designer News login endpoints.

    Requests are sent through a shared :class:`requests.Session`.  Because
    ``requests`` is blocking, every call is handed to a worker thread with
    :func:`asyncio.to_thread` so the event loop keeps running while the
    request is in flight.

    Authorization is delegated to an optional
    :class:`~designernews.auth.interfaces.AuthProvider`, consulted each time
    an authorized request is built.
    """

    BASE_URL = "https://www.designernews.co/"

    def __init__(
        self,
        user_agent: str,
        auth: AuthProvider | None = None,
        base_url: str = BASE_URL,
        timeout: float = 20,
    ):
        """Initialise the client.

        Args:
            user_agent: The User-Agent header value for all HTTP requests.
            auth: Supplies the bearer token for :meth:`get_authed_user`.
                When ``None`` the request is sent unauthenticated.
            base_url: API root, with a trailing slash.
            timeout: Per-request timeout in seconds.  Exceeding it surfaces
                as a :class:`requests.Timeout`.
        """
        self.base_url = base_url
        self.timeout = timeout
        self._auth = auth

        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent,
            "Accept": "application/json",
        })

    async def login(self, params: dict[str, str]) -> ApiResponse:
        """POST the password grant to ``oauth/token``.

        Returns:
            An :class:`ApiResponse` whose body is an :class:`AccessToken`,
            or ``None`` when the payload carries no ``access_token``.

        Raises:
            requests.RequestException: On connection errors, timeouts or an
                undecodable success payload.
        """
        r = await asyncio.to_thread(
            self.session.post,
            f"{self.base_url}oauth/token",
            data=params,
            timeout=self.timeout,
        )
        logger.debug("oauth/token answered %s", r.status_code)
        return self._to_response(r, self._parse_token)

    async def get_authed_user(self) -> ApiResponse:
        """GET ``api/v2/me`` with the current bearer token.

        Returns:
            An :class:`ApiResponse` whose body is a list of :class:`User`,
            or ``None`` when the ``users`` envelope is missing.

        Raises:
            requests.RequestException: On connection errors, timeouts or an
                undecodable success payload.
        """
        headers: dict[str, str] = {}
        if self._auth and self._auth.is_authenticated():
            headers.update(self._auth.get_credentials().headers)

        r = await asyncio.to_thread(
            self.session.get,
            f"{self.base_url}api/v2/me",
            headers=headers,
            timeout=self.timeout,
        )
        logger.debug("api/v2/me answered %s", r.status_code)
        return self._to_response(r, self._parse_users)

    # -------------------------
    # Internal helpers
    # -------------------------

    @staticmethod
    def _to_response(r: requests.Response, parse) -> ApiResponse:
        """Wrap a raw response, parsing the body only for 2xx statuses."""
        if not r.ok or not r.content:
            return ApiResponse(status_code=r.status_code)
        return ApiResponse(status_code=r.status_code, body=parse(r.json()))

    @staticmethod
    def _parse_token(data) -> AccessToken | None:
        # A payload without a token is reported as a missing body, so login
        # fails before touching the token store.
        if not isinstance(data, dict) or not data.get("access_token"):
            return None
        return AccessToken(access_token=data["access_token"])

    @staticmethod
    def _parse_users(data) -> list[User] | None:
        if not isinstance(data, dict):
            return None
        users = data.get("users")
        if users is None:
            return None
        try:
            return [User.from_dict(u) for u in users]
        except (TypeError, AttributeError) as e:
            raise requests.exceptions.InvalidJSONError(
                f"Unexpected user payload: {e}"
            ) from e
