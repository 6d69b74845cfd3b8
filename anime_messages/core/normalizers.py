"""Normalization of AniList payloads into the record types."""

from typing import Dict, Any, Optional
from ..models.types import (
    Title, FuzzyDate, NextAiringEpisode, ListTitle, MediaRecord, InfoFields, CountdownFields,
)


def norm_title(t: Dict[str, Any]) -> Title:
    t = t or {}
    return {"romaji": t.get("romaji"), "english": t.get("english"), "native": t.get("native")}


def norm_date(d: Optional[Dict[str, Any]]) -> FuzzyDate:
    d = d or {}
    return {"year": d.get("year"), "month": d.get("month"), "day": d.get("day")}


def norm_next_airing(n: Optional[Dict[str, Any]]) -> Optional[NextAiringEpisode]:
    if not n:
        return None
    return {"episode": n.get("episode"), "timeUntilAiring": n.get("timeUntilAiring"), "airingAt": n.get("airingAt")}


def norm_list_title(m: Dict[str, Any]) -> ListTitle:
    return {
        "id": m.get("id"),
        "status": m.get("status"),
        "title": norm_title(m.get("title")),
        "countryOfOrigin": m.get("countryOfOrigin"),
        "siteUrl": m.get("siteUrl"),
        "nextAiringEpisode": norm_next_airing(m.get("nextAiringEpisode")),
    }


def norm_media(m: Dict[str, Any]) -> MediaRecord:
    cover = m.get("coverImage") or {}
    streaming = [
        {"title": ep.get("title"), "url": ep.get("url"), "site": ep.get("site")}
        for ep in (m.get("streamingEpisodes") or [])
    ]
    return {
        "id": m.get("id"),
        "type": m.get("type"),
        "title": norm_title(m.get("title")),
        "siteUrl": m.get("siteUrl"),
        "status": m.get("status"),
        "format": m.get("format"),
        "source": m.get("source"),
        "season": m.get("season"),
        "startDate": norm_date(m.get("startDate")),
        "endDate": norm_date(m.get("endDate")),
        "duration": m.get("duration"),
        "episodes": m.get("episodes"),
        "chapters": m.get("chapters"),
        "volumes": m.get("volumes"),
        "isAdult": bool(m.get("isAdult")),
        "countryOfOrigin": m.get("countryOfOrigin"),
        "coverImage": {"extraLarge": cover.get("extraLarge"), "large": cover.get("large")},
        "bannerImage": m.get("bannerImage"),
        "genres": m.get("genres") or [],
        "averageScore": m.get("averageScore"),
        "description": m.get("description") or "",
        "streamingEpisodes": streaming,
        "nextAiringEpisode": norm_next_airing(m.get("nextAiringEpisode")),
    }


def info_fields(item: ListTitle) -> InfoFields:
    """Fields the info line renders; id, status and airing data are left out."""
    return {"title": item["title"], "countryOfOrigin": item.get("countryOfOrigin"), "siteUrl": item.get("siteUrl")}


def countdown_fields(item: ListTitle) -> CountdownFields:
    return {
        "title": item["title"],
        "countryOfOrigin": item.get("countryOfOrigin"),
        "siteUrl": item.get("siteUrl"),
        "nextAiringEpisode": item.get("nextAiringEpisode"),
    }
