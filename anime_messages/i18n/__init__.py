"""Translation provider for anime-messages.

Renderers only rely on ``t(key, params=None, locale=None)``; any object with
that method can stand in for :class:`Translation`. Templates are Telegram HTML
and parameters are inserted verbatim: callers escape AniList text first.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from .locales import CATALOGS

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class _Params(dict):
    def __missing__(self, key: str) -> str:
        return ""


class Translation:
    """Dictionary-backed key/locale lookup with str.format interpolation."""

    def __init__(self, language: str = DEFAULT_LANGUAGE,
                 catalogs: Optional[Mapping[str, Mapping[str, str]]] = None) -> None:
        self.catalogs = catalogs if catalogs is not None else CATALOGS
        self.language = language if language in self.catalogs else DEFAULT_LANGUAGE

    def languages(self):
        return sorted(self.catalogs)

    def _template(self, key: str, locale: str) -> Optional[str]:
        for lang in (locale, DEFAULT_LANGUAGE):
            template = (self.catalogs.get(lang) or {}).get(key)
            if template is not None:
                return template
        return None

    def t(self, key: str, params: Optional[Dict[str, Any]] = None, locale: Optional[str] = None) -> str:
        """Localized text for ``key``; ``locale`` overrides the instance language."""
        template = self._template(key, locale or self.language)
        if template is None:
            logger.warning("Missing translation key %r (%s)", key, locale or self.language)
            return key
        values = _Params({k: "" if v is None else v for k, v in (params or {}).items()})
        return template.format_map(values)


__all__ = ["Translation", "DEFAULT_LANGUAGE"]
