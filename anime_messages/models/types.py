"""Type definitions for anime-messages."""

from enum import Enum
from typing import TypedDict, Optional, List


class Status(str, Enum):
    RELEASING = "RELEASING"
    FINISHED = "FINISHED"
    CANCELLED = "CANCELLED"
    NOT_YET_RELEASED = "NOT_YET_RELEASED"
    HIATUS = "HIATUS"


class ListFilter(str, Enum):
    """Options of the watchlist/readlist category menus."""
    ALL = "ALL"
    RELEASING = "RELEASING"
    FINISHED = "FINISHED"
    CANCELLED = "CANCELLED"
    NOT_YET_RELEASED = "NOT_YET_RELEASED"


class MediaType(str, Enum):
    ANIME = "ANIME"
    MANGA = "MANGA"


class Title(TypedDict):
    romaji: Optional[str]
    english: Optional[str]
    native: Optional[str]


class FuzzyDate(TypedDict):
    year: Optional[int]
    month: Optional[int]
    day: Optional[int]


class NextAiringEpisode(TypedDict):
    episode: Optional[int]
    timeUntilAiring: Optional[int]   # seconds
    airingAt: Optional[int]          # unix timestamp


class CoverImage(TypedDict):
    extraLarge: Optional[str]
    large: Optional[str]


class StreamingEpisode(TypedDict):
    title: Optional[str]
    url: Optional[str]
    site: Optional[str]


class ListTitle(TypedDict):
    id: int
    status: Optional[str]           # Status value as returned by AniList
    title: Title
    countryOfOrigin: Optional[str]  # JP/CN/KR/TW
    siteUrl: Optional[str]
    nextAiringEpisode: Optional[NextAiringEpisode]


class MediaRecord(TypedDict):
    id: int
    type: Optional[str]
    title: Title
    siteUrl: Optional[str]
    status: Optional[str]
    format: Optional[str]           # TV/MOVIE/OVA/ONA/MANGA/ONE_SHOT...
    source: Optional[str]           # ORIGINAL/MANGA/LIGHT_NOVEL...
    season: Optional[str]           # WINTER/SPRING/SUMMER/FALL
    startDate: FuzzyDate
    endDate: FuzzyDate
    duration: Optional[int]         # minutes per episode
    episodes: Optional[int]
    chapters: Optional[int]
    volumes: Optional[int]
    isAdult: bool
    countryOfOrigin: Optional[str]
    coverImage: CoverImage
    bannerImage: Optional[str]
    genres: List[str]
    averageScore: Optional[int]     # 0-100
    description: str
    streamingEpisodes: List[StreamingEpisode]
    nextAiringEpisode: Optional[NextAiringEpisode]


class UserEntry(TypedDict, total=False):
    content_id: int


# Render inputs: explicit selections of ListTitle fields

class InfoFields(TypedDict):
    title: Title
    countryOfOrigin: Optional[str]
    siteUrl: Optional[str]


class CountdownFields(InfoFields):
    nextAiringEpisode: Optional[NextAiringEpisode]
