"""Single media tools: detail card and release announcements."""

import asyncio

from ..core.http_client import err_from_exception, SCHEMA
from ..core.lookup import media_record
from ..i18n import Translation, DEFAULT_LANGUAGE
from ..models.types import MediaType
from ..render.media import handle_media_more, handle_new_release, handle_user_release


async def media_more(content_id: int, kind: str = "ANIME", language: str = DEFAULT_LANGUAGE):
    """Detail card for an AniList id. kind: ANIME or MANGA."""
    try:
        text = await handle_media_more(int(content_id), kind.upper(), Translation(language))
        return {"schemaVersion": SCHEMA, "id": content_id, "kind": kind.upper(), "text": text}
    except Exception as e:
        return err_from_exception("anilist", e)


async def release_message(content_id: int, kind: str = "ANIME", language: str = DEFAULT_LANGUAGE,
                          personal: bool = False):
    """
    Release announcement for an AniList id.
    personal=True gives the shorter message sent to users following the title.
    """
    try:
        media = await asyncio.to_thread(media_record, int(content_id), MediaType(kind.upper()))
        render = handle_user_release if personal else handle_new_release
        text = render(media, language, Translation(language))
        return {"schemaVersion": SCHEMA, "id": content_id, "kind": kind.upper(), "text": text}
    except Exception as e:
        return err_from_exception("anilist", e)


def register_tools(mcp):
    mcp.tool()(media_more)
    mcp.tool()(release_message)
