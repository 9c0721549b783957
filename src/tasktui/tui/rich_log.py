# ♥♥─── Textual Global Logging Integration ──────────────────────────────────────
"""Integrates Textual with the global logging system."""

from __future__ import annotations

from typing import Any
import contextlib

from loguru import logger

from rich.text import Text

from textual.widgets import RichLog

from tasktui.custom_logger import LEVEL_CONFIG


# ─── Textual Console Widget ───────────────────────────────────────────────────
class TextualLogConsole(RichLog):
    """Log panel fed by a loguru sink."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(markup=False, wrap=True, **kwargs)

    def on_mount(self) -> None:
        logging_mixin = getattr(self.app, "logging", None)
        if isinstance(logging_mixin, LoggingMixin):
            logging_mixin.setup_logging_widget(self)

    def on_unmount(self) -> None:
        logging_mixin = getattr(self.app, "logging", None)
        if isinstance(logging_mixin, LoggingMixin):
            logging_mixin.teardown_logging()


# ─── Textual Sink for Loguru ──────────────────────────────────────────────────
class TextualSink:
    """Loguru sink optimized for Textual widgets."""

    def __init__(self, console_widget: TextualLogConsole) -> None:
        self.console = console_widget

    def __call__(self, message: Any) -> None:
        try:
            self._write_formatted_message(message.record)
        except Exception as e:  # noqa: BLE001
            self.console.write(Text(f"ERROR in TextualSink: {e}", style="red"))

    def _write_formatted_message(self, record: dict[str, Any]) -> None:
        time_str = record["time"].strftime("%H:%M:%S")
        level_name = record["level"].name
        level_config = LEVEL_CONFIG.get(level_name, {"icon": "•", "color": "#a0aec0"})
        level_color = level_config.get("color", "#a0aec0")

        line = Text()
        line.append(f"{time_str} ", style="dim")
        line.append(f"{level_config.get('icon', '•')} ", style=level_color)
        line.append(record["message"], style=level_color)

        self.console.write(line, expand=True)


# ─── Integration Helper Functions ──────────────────────────────────────────────
def add_textual_sink(console_widget: TextualLogConsole, level: str = "INFO") -> int:
    sink = TextualSink(console_widget)
    return logger.add(
        sink=sink,
        level=level,
        format="{message}",
        colorize=False,
        backtrace=False,
        diagnose=False,
    )


def remove_textual_sink(sink_id: int) -> None:
    with contextlib.suppress(ValueError):
        logger.remove(sink_id)


# ─── Textual App Mixin ─────────────────────────────────────────────────────────
class LoggingMixin:
    """Tracks the loguru sink attached to the in-app log panel."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._textual_sink_id: int | None = None

    @property
    def attached(self) -> bool:
        return self._textual_sink_id is not None

    def setup_logging_widget(self, log_widget: TextualLogConsole, level: str = "INFO") -> None:
        if self._textual_sink_id is not None:
            remove_textual_sink(self._textual_sink_id)
        self._textual_sink_id = add_textual_sink(log_widget, level)

    def teardown_logging(self) -> None:
        if self._textual_sink_id is not None:
            remove_textual_sink(self._textual_sink_id)
            self._textual_sink_id = None
