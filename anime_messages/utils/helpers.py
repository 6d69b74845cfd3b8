"""Helper functions for anime-messages."""

import html
import re

import roman

_ACRONYMS = {"TV", "OVA", "ONA"}
_TAG = re.compile(r"</?[a-zA-Z][^>]*>")
_BR = re.compile(r"<br\s*/?>", re.IGNORECASE)


def to_roman(n: int) -> str:
    """Roman numeral for a 1-based rank."""
    if n < 1:
        raise ValueError(f"cannot write {n} in roman numerals")
    try:
        return roman.toRoman(n)
    except roman.RomanError as e:
        raise ValueError(str(e)) from e


def strip_html(text: str) -> str:
    """Plain text of an AniList description: tags dropped, <br> as newline, entities decoded."""
    text = _BR.sub("\n", text or "")
    return html.unescape(_TAG.sub("", text)).strip()


def escape(value) -> str:
    """Text made safe for Telegram HTML templates."""
    if value is None:
        return ""
    return html.escape(str(value))


def humanize(value: str) -> str:
    """'LIGHT_NOVEL' -> 'Light Novel'; short codes such as TV or OVA stay upper case."""
    if len(value) <= 3:
        return value
    return " ".join(w if w in _ACRONYMS else w.capitalize() for w in value.split("_"))
