"""Core functionality for anime-messages."""

from .cache import cache_info, cache_clear, gql
from .http_client import http_get, http_post, err_payload, err_from_exception
from .lookup import anime_search_title, manga_search_title, media_anime, media_manga
from .normalizers import norm_title, norm_list_title, norm_media, info_fields, countdown_fields

__all__ = [
    "cache_info", "cache_clear", "gql",
    "http_get", "http_post", "err_payload", "err_from_exception",
    "anime_search_title", "manga_search_title", "media_anime", "media_manga",
    "norm_title", "norm_list_title", "norm_media", "info_fields", "countdown_fields",
]
