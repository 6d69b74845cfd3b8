"""Bundled translation catalogs, keyed by language code."""

from .en import STRINGS as EN
from .pt import STRINGS as PT

CATALOGS = {"en": EN, "pt": PT}

__all__ = ["CATALOGS"]
