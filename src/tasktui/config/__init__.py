# ♥♥─── Config Init ──────────────────────────────────────────────────────────────
from __future__ import annotations

from .app_config import get_settings, reset_settings_cache, get_application_settings
from .app_config_model import ApplicationSettings


__all__ = ["ApplicationSettings", "get_application_settings", "get_settings", "reset_settings_cache"]
