import asyncio

from anime_messages.render import media as render
from anime_messages.server import create_app
from anime_messages.tools import lists, media as media_tools, meta
from conftest import make_title


def test_health_ok():
    h = meta.health()
    assert isinstance(h, dict)
    assert h.get("schemaVersion") == "1.0.0"
    assert h.get("ok") is True
    assert "anilist" in h.get("sources", [])


def test_about_lists_languages():
    info = meta.about()
    assert info["name"] == "anime-messages"
    assert set(info["languages"]) >= {"en", "pt"}


def test_anime_list_tool(monkeypatch):
    monkeypatch.setattr(render, "anime_search_title",
                        lambda content_id: make_title(content_id, english="Frieren", status="RELEASING"))

    out = asyncio.run(lists.anime_list([154587], "RELEASING", "en"))

    assert out["schemaVersion"] == "1.0.0"
    assert out["text"] == "<b>Airing anime</b>\n\n🇺🇸 Frieren\n\n"


def test_countdown_tool_error_payload(monkeypatch):
    def down(content_id):
        raise LookupError(f"ANIME {content_id} not found")

    monkeypatch.setattr(render, "anime_search_title", down)

    out = asyncio.run(lists.countdown([1, 2]))

    assert out["error"]["code"] == "NOT_FOUND"
    assert out["error"]["source"] == "anilist"


def test_manga_list_menu_without_filter():
    out = asyncio.run(lists.manga_list([1], None, "pt"))
    assert out["text"] == "Escolha qual parte da sua lista de mangás você quer ver."


def test_release_message_tool(monkeypatch, media):
    monkeypatch.setattr(media_tools, "media_record", lambda content_id, kind: media)

    public = asyncio.run(media_tools.release_message(21, "anime", "en"))
    personal = asyncio.run(media_tools.release_message(21, "anime", "en", personal=True))

    assert "New release!" in public["text"]
    assert "A title you follow was updated!" in personal["text"]
    assert public["kind"] == "ANIME"


def test_media_more_tool_bad_kind():
    out = asyncio.run(media_tools.media_more(21, "novel"))
    assert out["error"]["code"] == "BAD_REQUEST"


def test_create_app_registers_every_tool():
    tools = asyncio.run(create_app().list_tools())
    assert {tool.name for tool in tools} == {
        "anime_list", "manga_list", "countdown", "media_more", "release_message",
        "health", "about", "cache_info", "cache_clear",
    }
