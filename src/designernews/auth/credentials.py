"""Persistent storage for Designer News session data.

Two separate files are managed here:

* ``token.json`` — the OAuth access token (``access_token``).  Written by
  a successful token exchange, removed by logout.
* ``user.json`` — the profile of the logged-in user.  Written by
  :class:`~designernews.services.login_service.LoginService` once login
  completes.

Both files are stored under ``~/.config/designernews/`` with permissions
restricted to the owner (0o600).
"""

import json
from pathlib import Path

_CONFIG_DIR = Path.home() / ".config" / "designernews"
_TOKEN_FILE = _CONFIG_DIR / "token.json"
_USER_FILE = _CONFIG_DIR / "user.json"


def _write_private(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    path.chmod(0o600)


def _read_json(path: Path) -> dict | None:
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _remove(path: Path) -> bool:
    if path.exists():
        path.unlink()
        return True
    return False


# ---------------------------------------------------------------------------
# Access token
# ---------------------------------------------------------------------------


def save_token(access_token: str, path: Path | None = None) -> None:
    """Persist the access token.

    Creates the config directory if it does not already exist and restricts
    file permissions to the owner only.

    Args:
        access_token: The OAuth bearer token.
        path: Override for the token file location.
    """
    _write_private(path or _TOKEN_FILE, {"access_token": access_token})


def load_token(path: Path | None = None) -> str | None:
    """Load the access token.

    Args:
        path: Override for the token file location.

    Returns:
        The stored token, or ``None`` if no file exists, it cannot be
        parsed, or it holds no token.
    """
    data = _read_json(path or _TOKEN_FILE)
    if not data:
        return None
    return data.get("access_token") or None


def clear_token(path: Path | None = None) -> bool:
    """Remove the token file.

    Returns:
        ``True`` if the file was deleted, ``False`` if it did not exist.
    """
    return _remove(path or _TOKEN_FILE)


def token_path() -> Path:
    """Return the default path of the token file."""
    return _TOKEN_FILE


# ---------------------------------------------------------------------------
# Logged-in user
# ---------------------------------------------------------------------------


def save_user(user: dict, path: Path | None = None) -> None:
    """Persist the logged-in user's profile.

    Args:
        user: The profile as a plain dictionary.
        path: Override for the user file location.
    """
    _write_private(path or _USER_FILE, user)


def load_user(path: Path | None = None) -> dict | None:
    """Load the logged-in user's profile.

    Returns:
        The profile dictionary, or ``None`` if it is missing or unreadable.
    """
    return _read_json(path or _USER_FILE)


def clear_user(path: Path | None = None) -> bool:
    """Remove the user file.

    Returns:
        ``True`` if the file was deleted, ``False`` if it did not exist.
    """
    return _remove(path or _USER_FILE)


def user_path() -> Path:
    """Return the default path of the user file."""
    return _USER_FILE
