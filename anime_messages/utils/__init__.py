"""Utility helpers for anime-messages."""

from .helpers import to_roman, strip_html, escape, humanize

__all__ = ["to_roman", "strip_html", "escape", "humanize"]
