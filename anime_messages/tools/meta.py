"""Metadata, health and cache tools for anime-messages."""

from importlib.metadata import version, PackageNotFoundError

from ..core.cache import ANILIST_GQL, cache_info as _cache_info, cache_clear as _cache_clear
from ..core.http_client import DEFAULT_TIMEOUT, SCHEMA
from ..i18n import Translation

# Version info
try:
    __VERSION__ = version("anime-messages")
except PackageNotFoundError:
    __VERSION__ = "0.0.0+dev"


def health():
    """Health check endpoint."""
    return {"schemaVersion": SCHEMA, "ok": True, "sources": ["anilist"]}


def about():
    """About information for the service."""
    return {
        "schemaVersion": SCHEMA,
        "name": "anime-messages",
        "version": __VERSION__,
        "languages": Translation().languages(),
        "endpoints": {"anilist": ANILIST_GQL},
        "limits": {"timeoutSec": DEFAULT_TIMEOUT},
    }


def cache_info():
    """AniList query cache statistics."""
    info = _cache_info()
    info["schemaVersion"] = SCHEMA
    return info


def cache_clear():
    """Empty the AniList query cache."""
    return {"schemaVersion": SCHEMA, "cleared": _cache_clear()}


def register_tools(mcp):
    """Register meta/cache tools with FastMCP."""
    mcp.tool()(health)
    mcp.tool()(about)
    mcp.tool()(cache_info)
    mcp.tool()(cache_clear)
