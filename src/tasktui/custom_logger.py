# ♥♥─── Global Application Logger Configuration ───────────────────────────
"""Loguru configuration shared by the whole application.

On import only the rich console sink is installed, so importing any module
never touches the filesystem. :func:`setup_logging` adds the rotating file
sink once the settings (and therefore the data directory) are known.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger
import logging

from rich.text import Text

from .ui.console import console


if TYPE_CHECKING:
    from pathlib import Path


# ─── Configuration ─────────────────────────────────────────────────────────────

LEVEL_CONFIG: dict[str, dict[str, str]] = {
    "TRACE": {"icon": "·", "color": "#a0aec0"},
    "DEBUG": {"icon": "›", "color": "#718096"},
    "INFO": {"icon": "●", "color": "#4299e1"},
    "SUCCESS": {"icon": "✔", "color": "#48bb78"},
    "WARNING": {"icon": "▲", "color": "#ecc94b"},
    "ERROR": {"icon": "✖", "color": "#f56565"},
    "CRITICAL": {"icon": "☠", "color": "#f56565"},
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


# ─── Stdlib Bridge ─────────────────────────────────────────────────────────────
class InterceptHandler(logging.Handler):
    """Forwards records from the standard ``logging`` module to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


# ─── Log Manager ───────────────────────────────────────────────────────────────
class LogManager:
    """Owns the loguru sinks installed by the application."""

    def __init__(self, console_level: str = "WARNING") -> None:
        self.console: Any = console
        self.console_sink_id: int | None = None
        self.file_sink_id: int | None = None
        self.log_path: Path | None = None

        logger.remove()
        self.configure_console(console_level)
        logging.basicConfig(handlers=[InterceptHandler()], level=logging.WARNING, force=True)

    def configure_console(self, level: str) -> None:
        """Replace the console sink with one at ``level``."""
        if self.console_sink_id is not None:
            logger.remove(self.console_sink_id)
        self.console_sink_id = logger.add(
            sink=self._render_console,  # type: ignore[arg-type]
            level=level,
            format="{message}",
            colorize=False,
            backtrace=False,
            diagnose=False,
        )

    def configure_file(
        self,
        log_dir: Path | None,
        level: str = "INFO",
        log_file: str = "app.log",
        rotation: str = "10 MB",
        retention: str = "7 days",
    ) -> None:
        """Replace the file sink, or drop it when ``log_dir`` is ``None``.

        :param log_dir: Directory for the log file; created if missing.
        :param level: Minimum level written to the file.
        :param log_file: File name inside ``log_dir``.
        :param rotation: Loguru rotation policy.
        :param retention: Loguru retention policy.
        """
        if self.file_sink_id is not None:
            logger.remove(self.file_sink_id)
            self.file_sink_id = None
            self.log_path = None
        if log_dir is None:
            return

        log_dir.mkdir(parents=True, exist_ok=True)
        self.log_path = log_dir / log_file
        self.file_sink_id = logger.add(
            sink=self.log_path,
            level=level,
            format=FILE_FORMAT,
            backtrace=True,
            diagnose=False,
            rotation=rotation,
            retention=retention,
            compression="zip",
            encoding="utf-8",
        )

    def _render_console(self, message: Any) -> None:
        record = message.record
        level_name = record["level"].name
        icon = LEVEL_CONFIG.get(level_name, {"icon": "•"})["icon"]
        level_style = f"log.level.{level_name.lower()}"

        self.console.print(
            Text(record["time"].strftime("%H:%M:%S"), style="log.time"),
            Text("|", style="log.separator"),
            Text(record["module"], style="log.module"),
            Text(f"{icon:<2}", style=level_style),
            Text(record["message"], style=level_style),
            sep=" ",
        )


# ─── Global Instance and Helper Functions ──────────────────────────────────────

log_manager = LogManager()


def setup_logging(
    console_level: str = "WARNING",
    file_level: str = "INFO",
    log_dir: Path | None = None,
    log_file: str = "app.log",
    **kwargs: Any,
) -> None:
    """Reconfigure both sinks.

    :param console_level: Minimum level for console output.
    :param file_level: Minimum level for file output.
    :param log_dir: Directory of the log file; ``None`` disables file logging.
    :param log_file: Name of the log file.
    :param kwargs: ``rotation`` / ``retention`` passed to the file sink.
    """
    log_manager.configure_console(console_level)
    log_manager.configure_file(log_dir, file_level, log_file, **kwargs)


def get_logger() -> Any:
    """Get the configured Loguru logger instance."""
    return logger


log = logger
