"""anime-messages package.

Chat texts for AniList watchlists, countdowns and release announcements.
Exports the FastMCP app factory `create_app`.
"""
from .server import create_app

__all__ = ["create_app"]
