# ♥♥─── Textual Theme Bridge ─────────────────────────────────────
"""Bridge between the shared palettes and Textual themes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.theme import Theme as TextualTheme

from tasktui.ui import switch_theme as switch_console_theme
from tasktui.core.models import ThemeMode
from tasktui.custom_logger import log
from tasktui.ui.theme_manager import StyleMapper


if TYPE_CHECKING:
    from textual.app import App


TEXTUAL_THEME_NAMES: dict[ThemeMode, str] = {
    ThemeMode.LIGHT: "tasktui-light",
    ThemeMode.DARK: "tasktui-dark",
}


class TextualThemeBridge:
    """Converts palettes to Textual Theme objects."""

    def __init__(self) -> None:
        self._textual_themes_cache: dict[ThemeMode, TextualTheme] = {}
        self.style_mapper = StyleMapper()

    def to_textual_theme(self, mode: ThemeMode) -> TextualTheme:
        """Build (or reuse) the Textual theme for ``mode``."""
        if mode in self._textual_themes_cache:
            return self._textual_themes_cache[mode]

        palette = StyleMapper.get_palette(mode.value)
        textual_theme = TextualTheme(
            name=TEXTUAL_THEME_NAMES[mode],
            dark=mode is ThemeMode.DARK,
            **self.style_mapper.map_to_textual_colors(palette),
            variables=self.style_mapper.create_textual_variables(palette),
        )

        self._textual_themes_cache[mode] = textual_theme
        log.debug(f"Created Textual theme '{textual_theme.name}'")

        return textual_theme

    def get_all_textual_themes(self) -> dict[ThemeMode, TextualTheme]:
        return {mode: self.to_textual_theme(mode) for mode in ThemeMode}


# ─── Theme Manager for Textual ────────────────────────────────────────────────
class TextualThemeManager:
    """Registers the palettes with a Textual app and applies theme modes."""

    def __init__(self, app: App) -> None:
        self.app = app
        self.bridge = TextualThemeBridge()
        self._setup_themes()

    def _setup_themes(self) -> None:
        textual_themes = self.bridge.get_all_textual_themes()
        for theme in textual_themes.values():
            self.app.register_theme(theme)

        log.debug(f"Registered {len(textual_themes)} Textual themes")

    def apply(self, mode: ThemeMode) -> None:
        """Switch the app (and the log console palette) to ``mode``."""
        self.app.theme = TEXTUAL_THEME_NAMES[mode]
        switch_console_theme(mode.value)
        log.debug(f"Applied theme: {mode}")
