import pytest


class FakeTranslation:
    """Records every lookup and renders it as key(param=value,...)."""

    def __init__(self):
        self.calls = []

    def t(self, key, params=None, locale=None):
        params = params or {}
        self.calls.append((key, dict(params), locale))
        inner = ",".join(f"{k}={v}" for k, v in sorted(params.items()))
        return f"{key}({inner})"

    def keys(self):
        return [key for key, _, _ in self.calls]

    def params_of(self, key):
        return [params for k, params, _ in self.calls if k == key]


def make_title(id, status="FINISHED", english=None, romaji=None, native=None,
               country="JP", site_url=None, episode=None, time_until=None):
    nxt = None
    if episode is not None or time_until is not None:
        nxt = {"episode": episode, "timeUntilAiring": time_until, "airingAt": None}
    return {
        "id": id,
        "status": status,
        "title": {"english": english, "romaji": romaji, "native": native},
        "countryOfOrigin": country,
        "siteUrl": site_url,
        "nextAiringEpisode": nxt,
    }


@pytest.fixture
def translation():
    return FakeTranslation()


@pytest.fixture
def media():
    return {
        "id": 21,
        "type": "ANIME",
        "title": {"english": "One Piece", "romaji": "ONE PIECE", "native": "ワンピース"},
        "siteUrl": "https://anilist.co/anime/21",
        "status": "RELEASING",
        "format": "TV",
        "source": "MANGA",
        "season": "FALL",
        "startDate": {"year": 1999, "month": 10, "day": 20},
        "endDate": {"year": None, "month": None, "day": None},
        "duration": 24,
        "episodes": None,
        "chapters": None,
        "volumes": None,
        "isAdult": False,
        "countryOfOrigin": "JP",
        "coverImage": {"extraLarge": "https://img/cover-xl.jpg", "large": "https://img/cover.jpg"},
        "bannerImage": "https://img/banner.jpg",
        "genres": ["Action", "Adventure"],
        "averageScore": 88,
        "description": "Gold Roger was known as the <i>Pirate King</i>.<br>",
        "streamingEpisodes": [
            {"title": "Episode 1 - I'm Luffy!", "url": "https://crunchyroll.com/ep1", "site": "Crunchyroll"},
        ],
        "nextAiringEpisode": {"episode": 1101, "timeUntilAiring": 90061, "airingAt": 1700000000},
    }
