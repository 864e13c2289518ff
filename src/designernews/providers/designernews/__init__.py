"""Designer News provider package."""

from designernews.providers.designernews.auth import TokenAuth
from designernews.providers.designernews.client import DesignerNewsClient

__all__ = ["DesignerNewsClient", "TokenAuth"]
