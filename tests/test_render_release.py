import asyncio

import pytest

from anime_messages.i18n import Translation
from anime_messages.render import media as render

DETAIL_FIELDS = {"image", "season", "duration", "startDate", "endDate"}


def test_new_release_carries_detail_fields(translation, media):
    render.handle_new_release(media, "pt", translation)

    (params,) = translation.params_of("newRelease")
    assert DETAIL_FIELDS <= set(params)
    assert {"siteUrl", "isAdult", "kind", "native", "english", "romaji", "newContent", "streamingEpisodes"} <= set(params)
    assert params["image"] == "<a href=\"https://img/banner.jpg\">\u200c</a>"
    assert params["season"] == "season(season=fall())"
    assert params["duration"] == "duration(duration=24)"


def test_user_release_omits_detail_fields(translation, media):
    render.handle_user_release(media, "pt", translation)

    (params,) = translation.params_of("userRelease")
    assert not DETAIL_FIELDS & set(params)
    assert params["siteUrl"] == "https://anilist.co/anime/21"
    assert params["newContent"] == "newEpisode(episode=1100)"


def test_release_uses_requested_locale(translation, media):
    render.handle_new_release(media, "pt", translation)
    render.handle_user_release(media, "pt", translation)

    locales = {locale for _, _, locale in translation.calls}
    assert locales == {"pt"}


def test_new_release_real_catalog(media):
    text = render.handle_new_release(media, "en", Translation())

    assert "New release!" in text
    assert "ワンピース" in text
    assert "Season: Fall" in text
    assert "Started on 10/20/1999" in text
    assert "Episode 1100 is out!" in text
    assert "https://crunchyroll.com/ep1" in text
    assert "None" not in text


def test_user_release_real_catalog_pt(media):
    text = render.handle_user_release(media, "pt", Translation())

    assert "Um título que você segue foi atualizado!" in text
    assert "O episódio 1100 saiu!" in text
    assert "Temporada" not in text
    assert "banner.jpg" not in text


def test_media_more_dispatches_on_kind(monkeypatch, media):
    seen = []

    def fake_anime(content_id):
        seen.append(("ANIME", content_id))
        return media

    def fake_manga(content_id):
        seen.append(("MANGA", content_id))
        return dict(media, type="MANGA", chapters=1100, episodes=None)

    monkeypatch.setattr(render, "media_anime", fake_anime)
    monkeypatch.setattr(render, "media_manga", fake_manga)

    anime_text = asyncio.run(render.handle_media_more(21, "ANIME", Translation()))
    manga_text = asyncio.run(render.handle_media_more(30013, "MANGA", Translation()))

    assert seen == [("ANIME", 21), ("MANGA", 30013)]
    assert "Releasing" in anime_text
    assert "1100 chapters" in manga_text


def test_media_more_rejects_unknown_kind(monkeypatch, media):
    monkeypatch.setattr(render, "media_anime", lambda content_id: media)
    with pytest.raises(ValueError):
        asyncio.run(render.handle_media_more(21, "NOVEL", Translation()))


def test_media_more_propagates_lookup_failure(monkeypatch):
    def missing(content_id):
        raise LookupError(f"ANIME {content_id} not found")

    monkeypatch.setattr(render, "media_anime", missing)
    with pytest.raises(LookupError):
        asyncio.run(render.handle_media_more(1, "ANIME", Translation()))
