from __future__ import annotations

from tasktui.config import get_settings
from tasktui.tui.main_app import TaskTUI
from tasktui.custom_logger import log, setup_logging


def main() -> None:
    """Entry point for the TaskTUI application."""
    settings = get_settings()
    try:
        settings.ensure_env_file()
        setup_logging(
            console_level=settings.logging.console_level,
            file_level=settings.logging.file_level,
            log_dir=settings.paths.log_dir,
            log_file=settings.logging.log_file,
        )
    except OSError as e:
        log.critical("Could not prepare the data directory: {}", e)
        msg = "FATAL: Could not write to the application data directory."
        raise SystemExit(msg) from e

    try:
        app = TaskTUI()
        app.run()
    except Exception as e:
        log.opt(exception=True).error("An unexpected error occurred: {}", str(e))
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
