"""AniList lookups by id: list titles for watchlists and full media records."""

from ..models.types import ListTitle, MediaRecord, MediaType
from .cache import gql
from .normalizers import norm_list_title, norm_media

TITLE_QUERY = """
query ($id: Int, $type: MediaType){
  Media(id: $id, type: $type){
    id status countryOfOrigin siteUrl
    title { romaji english native }
    nextAiringEpisode { episode timeUntilAiring airingAt }
  }
}"""

MEDIA_QUERY = """
query ($id: Int, $type: MediaType){
  Media(id: $id, type: $type){
    id type siteUrl status format source season duration episodes chapters volumes
    isAdult countryOfOrigin bannerImage genres averageScore
    description(asHtml: false)
    title { romaji english native }
    startDate { year month day }
    endDate { year month day }
    coverImage { extraLarge large }
    streamingEpisodes { title url site }
    nextAiringEpisode { episode timeUntilAiring airingAt }
  }
}"""


def _media(query: str, content_id: int, kind: MediaType) -> dict:
    data = gql(query, {"id": int(content_id), "type": kind.value})
    media = data.get("Media")
    if not media:
        raise LookupError(f"{kind.value} {content_id} not found")
    return media


def search_title(content_id: int, kind: MediaType) -> ListTitle:
    return norm_list_title(_media(TITLE_QUERY, content_id, kind))


def media_record(content_id: int, kind: MediaType) -> MediaRecord:
    return norm_media(_media(MEDIA_QUERY, content_id, kind))


def anime_search_title(content_id: int) -> ListTitle:
    return search_title(content_id, MediaType.ANIME)


def manga_search_title(content_id: int) -> ListTitle:
    return search_title(content_id, MediaType.MANGA)


def media_anime(content_id: int) -> MediaRecord:
    return media_record(content_id, MediaType.ANIME)


def media_manga(content_id: int) -> MediaRecord:
    return media_record(content_id, MediaType.MANGA)
