"""Chat texts for watchlists, readlists, countdowns and release announcements.

List renderers resolve every entry of the user's list at once: each AniList
lookup runs in a worker thread and ``asyncio.gather`` joins them, so one
failing lookup fails the whole render.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from ..core.lookup import anime_search_title, manga_search_title, media_anime, media_manga
from ..core.normalizers import countdown_fields, info_fields
from ..formatting.media import (
    media_all_title, media_duration, media_end_date, media_image, media_is_adult, media_kind,
    media_new_content, media_season, media_start_date, media_streaming_episodes, native_title,
    to_next_airing,
)
from ..formatting.message import media_message
from ..i18n import Translation
from ..models.types import (
    CountdownFields, InfoFields, ListFilter, ListTitle, MediaRecord, MediaType, Status, UserEntry,
)
from ..utils.helpers import escape, to_roman

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListOption:
    status: Optional[Status]
    template: str


ANIME_OPTIONS: Dict[ListFilter, ListOption] = {
    ListFilter.ALL: ListOption(None, "watchlistOptions"),
    ListFilter.RELEASING: ListOption(Status.RELEASING, "airingAnimeOptions"),
    ListFilter.FINISHED: ListOption(Status.FINISHED, "completedAnimeOptions"),
    ListFilter.CANCELLED: ListOption(Status.CANCELLED, "cancelledAnimeOptions"),
    ListFilter.NOT_YET_RELEASED: ListOption(Status.NOT_YET_RELEASED, "soonAnimeOptions"),
}

MANGA_OPTIONS: Dict[ListFilter, ListOption] = {
    ListFilter.ALL: ListOption(None, "readlistOptions"),
    ListFilter.RELEASING: ListOption(Status.RELEASING, "publishingMangaOptions"),
    ListFilter.FINISHED: ListOption(Status.FINISHED, "completedMangaOptions"),
    ListFilter.CANCELLED: ListOption(Status.CANCELLED, "cancelledMangaOptions"),
    ListFilter.NOT_YET_RELEASED: ListOption(Status.NOT_YET_RELEASED, "soonMangaOptions"),
}


def _as_filter(value) -> Optional[ListFilter]:
    if value is None:
        return None
    try:
        return ListFilter(value)
    except ValueError:
        return None


def handle_native(native: str, country_of_origin: Optional[str], translation: Translation) -> str:
    return native_title(native, country_of_origin, translation)


def handle_info(fields: InfoFields, translation: Translation) -> str:
    title = fields["title"]
    english, romaji, native = title.get("english"), title.get("romaji"), title.get("native")
    site_url = fields.get("siteUrl")
    response = ""

    if native is not None:
        response += handle_native(native, fields.get("countryOfOrigin"), translation)
    if english is not None:
        response += translation.t("english", {"english": escape(english)})
    if romaji is not None:
        response += translation.t("romaji", {"romaji": escape(romaji)})
    if site_url is not None:
        response += translation.t("seeMore", {"siteUrl": escape(site_url)})

    return response


def handle_countdown_info(index: int, fields: CountdownFields, translation: Translation) -> str:
    next_airing = fields.get("nextAiringEpisode") or {}
    response = f"{to_roman(index + 1)}\n"
    response += handle_info(fields, translation)

    if next_airing.get("episode") is not None:
        response += translation.t("episode", {"episode": next_airing["episode"]})
    if next_airing.get("timeUntilAiring") is not None:
        response += translation.t("timeUntilAiring", {"timeUntilAiring": to_next_airing(next_airing, translation)})

    return response


def to_print(response: Iterable[ListTitle], filter_by: Optional[str], translation: Translation) -> str:
    info = list(response)
    if filter_by is not None:
        info = [item for item in info if item.get("status") == filter_by]
    return "".join(f"{handle_info(info_fields(item), translation)}\n" for item in info)


async def _search_all(user: Iterable[UserEntry], search: Callable[[int], ListTitle]) -> List[ListTitle]:
    ids = [entry["content_id"] for entry in user]
    logger.debug("resolving %d titles with %s", len(ids), getattr(search, "__name__", search))
    return list(await asyncio.gather(*(asyncio.to_thread(search, content_id) for content_id in ids)))


async def fetch_anime_list(user: Iterable[UserEntry], status: Optional[str], translation: Translation) -> str:
    all_anime = await _search_all(user, anime_search_title)
    return to_print(all_anime, status, translation)


async def fetch_manga_list(user: Iterable[UserEntry], status: Optional[str], translation: Translation) -> str:
    all_manga = await _search_all(user, manga_search_title)
    return to_print(all_manga, status, translation)


def _time_until_airing(item: ListTitle):
    seconds = (item.get("nextAiringEpisode") or {}).get("timeUntilAiring")
    # titles without a schedule go last
    return (seconds is None, seconds or 0)


async def handle_countdown_data(user: Iterable[UserEntry], translation: Translation) -> str:
    all_anime = await _search_all(user, anime_search_title)
    countdown = [item for item in all_anime if item.get("status") == Status.RELEASING]
    ordered = sorted(countdown, key=_time_until_airing)
    return "".join(
        f"{handle_countdown_info(index, countdown_fields(item), translation)}\n"
        for index, item in enumerate(ordered)
    )


async def handle_anime(user: Iterable[UserEntry], status_filter, translation: Translation) -> str:
    option = ANIME_OPTIONS.get(_as_filter(status_filter))
    if option is None:
        return translation.t("watchlistMoreInfoOptions")
    anime = await fetch_anime_list(user, option.status, translation)
    return translation.t(option.template, {"anime": anime})


async def handle_manga(user: Iterable[UserEntry], status_filter, translation: Translation) -> str:
    option = MANGA_OPTIONS.get(_as_filter(status_filter))
    if option is None:
        return translation.t("readlistMoreInfoOptions")
    manga = await fetch_manga_list(user, option.status, translation)
    return translation.t(option.template, {"manga": manga})


async def handle_media_more(content: int, request, translation: Translation) -> str:
    lookup = media_anime if MediaType(request) == MediaType.ANIME else media_manga
    media = await asyncio.to_thread(lookup, content)
    return media_message(media, translation)


def handle_new_release(media: MediaRecord, language: str, translation: Translation) -> str:
    status = media.get("status")
    return translation.t("newRelease", {
        "siteUrl": escape(media.get("siteUrl")),
        "season": media_season(media.get("season"), language, translation),
        "isAdult": media_is_adult(media.get("isAdult"), language, translation),
        "kind": media_kind(media.get("format"), media.get("source"), language, translation),
        "image": media_image(media.get("coverImage"), media.get("bannerImage")),
        "duration": media_duration(media.get("duration"), language, translation),
        "endDate": media_end_date(media.get("endDate"), status, language, translation),
        **media_all_title(media["title"], media.get("countryOfOrigin"), language, translation),
        "startDate": media_start_date(media.get("startDate"), status, language, translation),
        "newContent": media_new_content(media.get("nextAiringEpisode"), media.get("episodes"), language, translation),
        "streamingEpisodes": media_streaming_episodes(media.get("streamingEpisodes"), language, translation),
    }, locale=language)


def handle_user_release(media: MediaRecord, language: str, translation: Translation) -> str:
    return translation.t("userRelease", {
        "siteUrl": escape(media.get("siteUrl")),
        "isAdult": media_is_adult(media.get("isAdult"), language, translation),
        "kind": media_kind(media.get("format"), media.get("source"), language, translation),
        **media_all_title(media["title"], media.get("countryOfOrigin"), language, translation),
        "newContent": media_new_content(media.get("nextAiringEpisode"), media.get("episodes"), language, translation),
        "streamingEpisodes": media_streaming_episodes(media.get("streamingEpisodes"), language, translation),
    }, locale=language)
