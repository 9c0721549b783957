# ♥♥─── i18n Init ──────────────────────────────────────────────────────────────
from __future__ import annotations

from .translations import TRANSLATIONS, TextKey, TranslationSet, lookup, translations_for


__all__ = ["TRANSLATIONS", "TextKey", "TranslationSet", "lookup", "translations_for"]
