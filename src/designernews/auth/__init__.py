"""Authentication layer — interfaces, token storage and the login flow."""

from designernews.auth.interfaces import AuthCredentials, AuthProvider, TokenStore
from designernews.auth.token_store import FileTokenStore, MemoryTokenStore

__all__ = [
    "AuthCredentials",
    "AuthProvider",
    "FileTokenStore",
    "MemoryTokenStore",
    "TokenStore",
]
