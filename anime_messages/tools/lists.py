"""Watchlist, readlist and countdown tools for anime-messages."""

from typing import List, Optional

from ..core.http_client import err_from_exception, SCHEMA
from ..i18n import Translation, DEFAULT_LANGUAGE
from ..render.media import handle_anime, handle_manga, handle_countdown_data


def _entries(content_ids: List[int]):
    return [{"content_id": int(cid)} for cid in content_ids]


async def anime_list(content_ids: List[int], filter: Optional[str] = "ALL", language: str = DEFAULT_LANGUAGE):
    """
    Watchlist text for AniList anime ids.
    filter: ALL, RELEASING, FINISHED, CANCELLED, NOT_YET_RELEASED; anything else returns the options menu.
    """
    try:
        text = await handle_anime(_entries(content_ids), filter, Translation(language))
        return {"schemaVersion": SCHEMA, "filter": filter, "text": text}
    except Exception as e:
        return err_from_exception("anilist", e)


async def manga_list(content_ids: List[int], filter: Optional[str] = "ALL", language: str = DEFAULT_LANGUAGE):
    """Readlist text for AniList manga ids (same filters as anime_list)."""
    try:
        text = await handle_manga(_entries(content_ids), filter, Translation(language))
        return {"schemaVersion": SCHEMA, "filter": filter, "text": text}
    except Exception as e:
        return err_from_exception("anilist", e)


async def countdown(content_ids: List[int], language: str = DEFAULT_LANGUAGE):
    """Airing anime of the watchlist, soonest next episode first."""
    try:
        text = await handle_countdown_data(_entries(content_ids), Translation(language))
        return {"schemaVersion": SCHEMA, "text": text}
    except Exception as e:
        return err_from_exception("anilist", e)


def register_tools(mcp):
    mcp.tool()(anime_list)
    mcp.tool()(manga_list)
    mcp.tool()(countdown)
