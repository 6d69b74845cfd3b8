"""MCP tools for anime-messages."""

from . import lists
from . import media
from . import meta

__all__ = ["lists", "media", "meta"]
