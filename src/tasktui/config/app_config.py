# ♥♥─── App Config ───────────────────────────────────────────────────────────────
from __future__ import annotations

from pydantic import ValidationError

from tasktui.custom_logger import log

from .app_config_model import ApplicationSettings


_cached_settings: ApplicationSettings | None = None


def _describe_errors(error: ValidationError) -> str:
    lines = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        lines.append(f"  - {field}: {detail['msg']} (got {detail.get('input', 'N/A')!r})")
    return "\n".join(lines)


# ─── Settings Factory ─────────────────────────────────────────────────────────
def get_application_settings() -> ApplicationSettings:
    """Load the settings on first use and return the same instance afterwards.

    :returns: The cached :class:`ApplicationSettings`.
    :raises SystemExit: If the settings are invalid or the data directory
        cannot be created.
    """
    global _cached_settings  # noqa: PLW0603

    if _cached_settings is not None:
        return _cached_settings

    try:
        settings = ApplicationSettings()
    except ValidationError as e:
        log.critical("Invalid TaskTUI configuration ({} errors):\n{}", e.error_count(), _describe_errors(e))
        msg = "FATAL: Invalid configuration. Check your TASKTUI_* variables and app_data/config/.env."
        raise SystemExit(msg) from e
    except OSError as e:
        log.critical("Could not prepare the data directory: {}", e)
        msg = "FATAL: Could not prepare the application data directory."
        raise SystemExit(msg) from e

    log.debug(
        "Settings loaded: storage '{}', language {}, theme {}.",
        settings.get_storage_file_path(),
        settings.preferences.default_language,
        settings.preferences.default_theme,
    )
    _cached_settings = settings
    return _cached_settings


def get_settings() -> ApplicationSettings:
    """Convenient alias for :func:`get_application_settings`."""
    return get_application_settings()


def reset_settings_cache() -> None:
    """Forget the cached settings so the next call reloads them."""
    global _cached_settings  # noqa: PLW0603
    _cached_settings = None
