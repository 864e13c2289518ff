"""Token store implementations."""

import logging
from pathlib import Path

from designernews.auth import credentials
from designernews.auth.interfaces import TokenStore

logger = logging.getLogger(__name__)


class MemoryTokenStore(TokenStore):
    """Keeps the token in process memory only."""

    def __init__(self, token: str | None = None):
        self._token = token or None

    def get(self) -> str | None:
        return self._token

    def set(self, token: str | None) -> None:
        self._token = token or None


class FileTokenStore(TokenStore):
    """Persists the token to ``~/.config/designernews/token.json``.

    The file is read on every :meth:`get` so that separate processes (for
    example two CLI invocations) see the same session.

    Args:
        path: Path to the token file.  Defaults to
            :func:`~designernews.auth.credentials.token_path`.
    """

    def __init__(self, path: Path | None = None):
        self._path = path or credentials.token_path()

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> str | None:
        return credentials.load_token(self._path)

    def set(self, token: str | None) -> None:
        if token:
            credentials.save_token(token, self._path)
            logger.debug("Access token written to %s", self._path)
        elif credentials.clear_token(self._path):
            logger.debug("Access token removed from %s", self._path)
