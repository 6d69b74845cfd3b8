"""The "more info" card shown for a single anime or manga."""

from ..i18n import Translation
from ..models.types import MediaRecord, MediaType
from ..utils.helpers import escape, strip_html
from .media import (
    media_all_title, media_duration, media_end_date, media_is_adult, media_kind, media_season,
    media_start_date,
)

DESCRIPTION_LIMIT = 300

STATUS_KEYS = {
    "RELEASING": "statusReleasing",
    "FINISHED": "statusFinished",
    "CANCELLED": "statusCancelled",
    "NOT_YET_RELEASED": "statusNotYetReleased",
    "HIATUS": "statusHiatus",
}


def _description(text: str) -> str:
    text = strip_html(text)
    if len(text) > DESCRIPTION_LIMIT:
        text = text[:DESCRIPTION_LIMIT].rstrip() + "..."
    return text


def media_message(media: MediaRecord, translation: Translation) -> str:
    t = translation.t
    language = None
    status = media.get("status")

    if media.get("type") == MediaType.MANGA or media.get("chapters"):
        count = t("chapters", {"chapters": media["chapters"]}) if media.get("chapters") else ""
    else:
        count = t("episodes", {"episodes": media["episodes"]}) if media.get("episodes") else ""

    description = _description(media.get("description") or "")

    return t("mediaMessage", {
        "siteUrl": escape(media.get("siteUrl")),
        **media_all_title(media["title"], media.get("countryOfOrigin"), language, translation),
        "kind": media_kind(media.get("format"), media.get("source"), language, translation),
        "isAdult": media_is_adult(media.get("isAdult"), language, translation),
        "status": t("status", {"status": t(STATUS_KEYS[status])}) if status in STATUS_KEYS else "",
        "count": count,
        "season": media_season(media.get("season"), language, translation),
        "startDate": media_start_date(media.get("startDate"), status, language, translation),
        "endDate": media_end_date(media.get("endDate"), status, language, translation),
        "duration": media_duration(media.get("duration"), language, translation),
        "score": t("score", {"score": media["averageScore"]}) if media.get("averageScore") else "",
        "genres": t("genres", {"genres": escape(", ".join(media["genres"]))}) if media.get("genres") else "",
        "description": t("description", {"description": escape(description)}) if description else "",
    })
