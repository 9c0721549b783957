# ♥♥─── Global Console and Utilities ───────────────────────────────────────────
from __future__ import annotations

from rich.traceback import install as install_rich_traceback

from .theme_manager import DARK_THEME_NAME, ConsoleManager


# ─── Initialization ────────────────────────────────────────────────────────────
theme_manager = ConsoleManager()
console = theme_manager.create_console(DARK_THEME_NAME)

install_rich_traceback(console=console, show_locals=False, word_wrap=True, extra_lines=3, suppress=[])


# ─── Core Functions ────────────────────────────────────────────────────────────
def switch_theme(name: str) -> None:
    """Switch the active console palette."""
    if not theme_manager.switch_theme(console, name):
        available = theme_manager.get_available_themes()
        msg = f"Theme '{name}' not found. Available: {available}"

        raise ValueError(msg)
