"""Models and type definitions for anime-messages."""

from .types import (
    Status, ListFilter, MediaType,
    Title, FuzzyDate, NextAiringEpisode, CoverImage, StreamingEpisode,
    ListTitle, MediaRecord, UserEntry, InfoFields, CountdownFields,
)

__all__ = [
    "Status", "ListFilter", "MediaType",
    "Title", "FuzzyDate", "NextAiringEpisode", "CoverImage", "StreamingEpisode",
    "ListTitle", "MediaRecord", "UserEntry", "InfoFields", "CountdownFields",
]
