"""Per-field formatters for media records.

Every helper returns an empty string when the field is absent, so templates
can simply concatenate the results. AniList text is HTML-escaped here, before
it reaches a template; helper outputs are markup and pass through as is.
"""

from typing import Dict, List, Optional

from ..i18n import Translation
from ..models.types import (
    Status, Title, FuzzyDate, NextAiringEpisode, CoverImage, StreamingEpisode,
)
from ..utils.helpers import escape, humanize

MAX_STREAMING_EPISODES = 5


def native_title(native: str, country_of_origin: Optional[str], translation: Translation,
                 language: Optional[str] = None) -> str:
    if country_of_origin == "JP":
        return translation.t("japan", {"japan": escape(native)}, locale=language)
    return translation.t("chinese", {"chinese": escape(native)}, locale=language)


def media_all_title(title: Title, country_of_origin: Optional[str], language: Optional[str],
                    translation: Translation) -> Dict[str, str]:
    """Rendered native/english/romaji lines, keyed for template parameters."""
    english, romaji, native = title.get("english"), title.get("romaji"), title.get("native")
    return {
        "native": native_title(native, country_of_origin, translation, language) if native is not None else "",
        "english": translation.t("english", {"english": escape(english)}, locale=language) if english is not None else "",
        "romaji": translation.t("romaji", {"romaji": escape(romaji)}, locale=language) if romaji is not None else "",
    }


def media_season(season: Optional[str], language: Optional[str], translation: Translation) -> str:
    if not season:
        return ""
    name = translation.t(season.lower(), locale=language)
    return translation.t("season", {"season": name}, locale=language)


def media_is_adult(is_adult: Optional[bool], language: Optional[str], translation: Translation) -> str:
    return translation.t("adult", locale=language) if is_adult else ""


def media_kind(format: Optional[str], source: Optional[str], language: Optional[str],
               translation: Translation) -> str:
    if not format:
        return ""
    if not source:
        return translation.t("kindFormat", {"format": humanize(format)}, locale=language)
    return translation.t("kind", {"format": humanize(format), "source": humanize(source)}, locale=language)


def media_image(cover_image: Optional[CoverImage], banner_image: Optional[str]) -> str:
    """Invisible anchor that makes Telegram show the picture as link preview."""
    cover = cover_image or {}
    url = banner_image or cover.get("extraLarge") or cover.get("large")
    if not url:
        return ""
    return f"<a href=\"{escape(url)}\">\u200c</a>"


def media_duration(duration: Optional[int], language: Optional[str], translation: Translation) -> str:
    if not duration:
        return ""
    return translation.t("duration", {"duration": duration}, locale=language)


def format_fuzzy_date(date: Optional[FuzzyDate], language: Optional[str], translation: Translation) -> str:
    date = date or {}
    year, month, day = date.get("year"), date.get("month"), date.get("day")
    if not year:
        return ""
    if month and day:
        return translation.t("dateFull", {"year": year, "month": f"{month:02d}", "day": f"{day:02d}"},
                             locale=language)
    if month:
        return translation.t("dateMonth", {"year": year, "month": f"{month:02d}"}, locale=language)
    return str(year)


def media_start_date(start_date: Optional[FuzzyDate], status: Optional[str], language: Optional[str],
                     translation: Translation) -> str:
    date = format_fuzzy_date(start_date, language, translation)
    if not date:
        return ""
    key = "startDateSoon" if status == Status.NOT_YET_RELEASED else "startDate"
    return translation.t(key, {"date": date}, locale=language)


def media_end_date(end_date: Optional[FuzzyDate], status: Optional[str], language: Optional[str],
                   translation: Translation) -> str:
    date = format_fuzzy_date(end_date, language, translation)
    if not date:
        return ""
    if status in (Status.FINISHED, Status.CANCELLED):
        return translation.t("endDate", {"date": date}, locale=language)
    if status == Status.RELEASING:
        return translation.t("endDateSoon", {"date": date}, locale=language)
    return ""


def media_new_content(next_airing_episode: Optional[NextAiringEpisode], episodes: Optional[int],
                      language: Optional[str], translation: Translation) -> str:
    """The episode that just came out, or the final count once nothing else is scheduled."""
    upcoming = (next_airing_episode or {}).get("episode")
    if upcoming is not None and upcoming > 1:
        return translation.t("newEpisode", {"episode": upcoming - 1}, locale=language)
    if upcoming is None and episodes:
        return translation.t("lastEpisode", {"episodes": episodes}, locale=language)
    return ""


def media_streaming_episodes(streaming_episodes: Optional[List[StreamingEpisode]], language: Optional[str],
                             translation: Translation) -> str:
    lines = [
        translation.t("streamingEpisode",
                      {"title": escape(ep.get("title") or ep.get("site") or ""), "url": escape(ep["url"])},
                      locale=language)
        for ep in (streaming_episodes or [])[:MAX_STREAMING_EPISODES]
        if ep.get("url")
    ]
    if not lines:
        return ""
    return translation.t("streamingEpisodes", {"episodes": "".join(lines)}, locale=language)


def to_next_airing(next_airing_episode: NextAiringEpisode, translation: Translation,
                   language: Optional[str] = None) -> str:
    seconds = max(0, next_airing_episode.get("timeUntilAiring") or 0)
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    return translation.t("airingTime", {"days": days, "hours": hours, "minutes": rest // 60}, locale=language)
