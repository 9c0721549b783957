# ♥♥─── UI Init ──────────────────────────────────────────────────────────────
from __future__ import annotations

from .icons import icons
from .console import console, switch_theme


__all__ = ["console", "icons", "switch_theme"]
