# ♥♥─── Console Style Manager ────────────────────────────────────────────────────
from __future__ import annotations

import os
from typing import Any

from rich.style import Style
from rich.theme import Theme
from rich.console import Console


# ─── Configuration & Types ─────────────────────────────────────────────────────

ThemeData = dict[str, str]
StyleMapping = dict[str, Style]

LIGHT_THEME_NAME = "light"
DARK_THEME_NAME = "dark"


def ensure_true_color() -> None:
	"""Set environment variables to hint for true color support."""
	os.environ.setdefault("COLORTERM", "truecolor")


# ─── Style Mapper ──────────────────────────────────────────────────────────────


class StyleMapper:
	"""Creates rich Style mappings and Textual colours from palette data."""

	PALETTES: dict[str, ThemeData] = {
		LIGHT_THEME_NAME: {
			"background": "#f3f4f6",
			"surface": "#ffffff",
			"panel": "#e5e7eb",
			"foreground": "#1f2937",
			"muted": "#6b7280",
			"purple": "#9f7aea",
			"pink": "#ed64a6",
			"blue": "#4299e1",
			"cyan": "#0bc5ea",
			"green": "#48bb78",
			"yellow": "#d69e2e",
			"red": "#e53e3e",
			"selectionBackground": "#d6bcfa",
		},
		DARK_THEME_NAME: {
			"background": "#111827",
			"surface": "#1f2937",
			"panel": "#374151",
			"foreground": "#e5e7eb",
			"muted": "#9ca3af",
			"purple": "#805ad5",
			"pink": "#d53f8c",
			"blue": "#3182ce",
			"cyan": "#00a3c4",
			"green": "#38a169",
			"yellow": "#ecc94b",
			"red": "#f56565",
			"selectionBackground": "#553c9a",
		},
	}

	STYLE_FALLBACKS: dict[str, str] = {
		"log.level.trace": "dim white",
		"log.level.debug": "dim white",
		"log.level.info": "blue",
		"log.level.success": "green",
		"log.level.warning": "yellow",
		"log.level.error": "red",
		"log.level.critical": "bold red",
		"log.time": "dim white",
		"log.separator": "blue",
		"log.module": "dim blue",
	}

	@classmethod
	def get_palette(cls, theme_name: str) -> ThemeData:
		"""Return the palette for ``theme_name``, falling back to the dark one."""
		return cls.PALETTES.get(theme_name, cls.PALETTES[DARK_THEME_NAME])

	@staticmethod
	def _get_color(theme_data: ThemeData, key: str, fallback: str = "#888888") -> str:
		"""Get a color value from the theme data."""
		return theme_data.get(key, fallback)

	@classmethod
	def create_styles_from_theme(cls, theme_data: ThemeData) -> StyleMapping:
		"""Create a rich Style mapping from a palette."""
		styles: StyleMapping = {}
		styles.update(cls._create_log_styles(theme_data))
		return styles

	@classmethod
	def _create_log_styles(cls, theme_data: ThemeData) -> StyleMapping:
		"""Create specific styles for logging output."""
		return {
			"log.level.trace": Style(color=cls._get_color(theme_data, "muted"), dim=True),
			"log.level.debug": Style(color=cls._get_color(theme_data, "muted")),
			"log.level.info": Style(color=cls._get_color(theme_data, "blue")),
			"log.level.success": Style(color=cls._get_color(theme_data, "green")),
			"log.level.warning": Style(color=cls._get_color(theme_data, "yellow")),
			"log.level.error": Style(color=cls._get_color(theme_data, "red")),
			"log.level.critical": Style(color=cls._get_color(theme_data, "red"), bold=True),
			"log.time": Style(color=cls._get_color(theme_data, "muted")),
			"log.separator": Style(color=cls._get_color(theme_data, "blue")),
			"log.module": Style(color=cls._get_color(theme_data, "purple"), dim=True),
		}

	def map_to_textual_colors(self, theme_data: dict[str, Any]) -> dict[str, str]:
		"""Map palette colours to the Textual theme structure."""
		color_mapping = {
			"primary": theme_data.get("purple"),
			"secondary": theme_data.get("pink"),
			"accent": theme_data.get("blue"),
			"warning": theme_data.get("yellow"),
			"error": theme_data.get("red"),
			"success": theme_data.get("green"),
			"foreground": theme_data.get("foreground"),
			"background": theme_data.get("background"),
			"surface": theme_data.get("surface"),
			"panel": theme_data.get("panel"),
		}

		# Only include non-None values
		return {k: v for k, v in color_mapping.items() if v is not None}

	def create_textual_variables(self, theme_data: dict[str, Any]) -> dict[str, str]:
		"""Create Textual-specific CSS variables from palette data."""
		background = theme_data.get("background", "#111827")
		foreground = theme_data.get("foreground", "#e5e7eb")
		primary = theme_data.get("purple", "#9f7aea")
		selection_background = theme_data.get("selectionBackground", "#553c9a")

		return {
			"input-cursor-foreground": background,
			"input-cursor-background": foreground,
			"input-selection-background": f"{selection_background} 40%",
			"border": primary,
			"border-blurred": theme_data.get("muted", "#6b7280"),
			"footer-key-foreground": primary,
			"block-cursor-text-style": "none",
			"task-completed": theme_data.get("green", "#48bb78"),
			"task-pending": primary,
		}


class ConsoleManager:
	"""Manage rich Console instances and their themes."""

	def __init__(self) -> None:
		# ids of consoles carrying a theme pushed by switch_theme
		self._switched: set[int] = set()

	def create_theme(self, theme_name: str) -> Theme:
		"""Create a rich Theme object for a palette name."""
		styles = StyleMapper.create_styles_from_theme(StyleMapper.get_palette(theme_name))

		for style_name, fallback in StyleMapper.STYLE_FALLBACKS.items():
			styles.setdefault(style_name, Style.parse(fallback))

		return Theme(styles)

	def create_console(self, theme_name: str = DARK_THEME_NAME) -> Console:
		"""Create a new rich Console with the specified theme."""
		ensure_true_color()

		return Console(
			theme=self.create_theme(theme_name),
			color_system="auto",
			highlight=False,
			markup=False,
			stderr=True,
			soft_wrap=True,
		)

	def switch_theme(self, console: Console, theme_name: str) -> bool:
		"""Switch the theme of an existing Console instance.

		The previously switched theme is popped first, so the console keeps at
		most one theme above its base theme.
		"""
		if theme_name not in StyleMapper.PALETTES:
			return False
		if id(console) in self._switched:
			console.pop_theme()
		console.push_theme(self.create_theme(theme_name))
		self._switched.add(id(console))
		return True

	def get_available_themes(self) -> list[str]:
		"""Return the names of the known palettes."""
		return list(StyleMapper.PALETTES)
