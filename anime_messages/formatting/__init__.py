"""Field formatters and the shared media message."""

from .media import (
    native_title, media_all_title, media_season, media_is_adult, media_kind, media_image,
    media_duration, format_fuzzy_date, media_start_date, media_end_date, media_new_content,
    media_streaming_episodes, to_next_airing,
)
from .message import media_message

__all__ = [
    "native_title", "media_all_title", "media_season", "media_is_adult", "media_kind", "media_image",
    "media_duration", "format_fuzzy_date", "media_start_date", "media_end_date", "media_new_content",
    "media_streaming_episodes", "to_next_airing", "media_message",
]
