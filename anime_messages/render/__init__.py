"""Renderers consumed by the bot's command handlers."""

from .media import (
    handle_anime, handle_manga, handle_countdown_data, handle_media_more,
    handle_new_release, handle_user_release,
)

__all__ = [
    "handle_anime", "handle_manga", "handle_countdown_data", "handle_media_more",
    "handle_new_release", "handle_user_release",
]
