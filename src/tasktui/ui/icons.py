# ♥♥─── Icons ─────────────────────────────────────────────────────────────────
from __future__ import annotations

from enum import StrEnum


class Icons(StrEnum):
    """Glyphs used across the interface."""

    CLOSE = "✕"
    PLUS = "+"
    SUN = "☀"
    MOON = "☾"
    GLOBE = "◍"
    CHART = "◔"


icons = Icons
