import logging

import pytest

from anime_messages.i18n import Translation, DEFAULT_LANGUAGE
from anime_messages.i18n.locales import CATALOGS


def test_catalogs_share_keys():
    base = set(CATALOGS[DEFAULT_LANGUAGE])
    for lang, strings in CATALOGS.items():
        assert set(strings) == base, f"{lang} catalog out of sync"


@pytest.mark.parametrize("lang", sorted(CATALOGS))
def test_templates_interpolate_without_params(lang):
    tr = Translation(lang)
    for key in CATALOGS[lang]:
        tr.t(key)  # unknown placeholders render empty


def test_interpolation_and_none_values():
    tr = Translation("en")
    assert tr.t("english", {"english": "Bleach"}) == "🇺🇸 Bleach\n"
    assert tr.t("seeMore", {"siteUrl": None}) == "<a href=\"\">See more</a>\n"


def test_locale_override():
    tr = Translation("en")
    assert tr.t("seeMore", {"siteUrl": "u"}, locale="pt") == "<a href=\"u\">Ver mais</a>\n"


def test_unknown_language_falls_back_to_default():
    tr = Translation("xx")
    assert tr.language == DEFAULT_LANGUAGE
    assert tr.t("winter", locale="xx") == "Winter"


def test_missing_key_returns_key_and_logs(caplog):
    tr = Translation("en")
    with caplog.at_level(logging.WARNING, logger="anime_messages.i18n"):
        assert tr.t("doesNotExist") == "doesNotExist"
    assert "doesNotExist" in caplog.text


def test_partial_catalog_falls_back_per_key():
    tr = Translation("es", catalogs={"en": {"a": "A {x}", "b": "B"}, "es": {"a": "Á {x}"}})
    assert tr.t("a", {"x": 1}) == "Á 1"
    assert tr.t("b") == "B"
    assert tr.languages() == ["en", "es"]
