# ♥♥─── Textual Dashboard Components ──────────────────────────────────────────
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textual.widgets import Label
from textual.containers import VerticalGroup


if TYPE_CHECKING:
    from textual.app import ComposeResult


def build_border_title(icon: str | None = None, title: str | None = None) -> str | None:
    if not title:
        return None
    return f"{icon} {title}" if icon else title


class StatTile(VerticalGroup):
    """A caption above a large value, e.g. ``Completed Tasks / 3``."""

    def __init__(self, *, label: str, value: Any = 0, css_classes: str | None = None, element_id: str | None = None, **kwargs: Any) -> None:
        self.label = label
        self.value = value
        classes = f"stat-tile {css_classes}" if css_classes else "stat-tile"
        kwargs.setdefault("id", element_id)
        super().__init__(classes=classes, **kwargs)

    def compose(self) -> ComposeResult:
        yield Label(self.label, classes="stat-label", markup=False)
        yield Label(str(self.value), classes="stat-value", markup=False)

    def update_tile(self, label: str, value: Any) -> None:
        """Update the caption and value in place."""
        self.label = label
        self.value = value
        if self.is_mounted:
            self.query_one(".stat-label", Label).update(label)
            self.query_one(".stat-value", Label).update(str(value))


class Panel(VerticalGroup):
    """A bordered group with an optional icon-prefixed title."""

    def __init__(self, *children: Any, title: str | None = None, title_icon: str | None = None, css_classes: str | None = None, element_id: str | None = None, **kwargs: Any) -> None:
        self.children_widgets = children
        self.title_icon = title_icon
        self.title_text = build_border_title(title_icon, title)
        classes = f"dashboard-panel {css_classes}" if css_classes else "dashboard-panel"
        kwargs.setdefault("id", element_id)
        super().__init__(classes=classes, **kwargs)

    def compose(self) -> ComposeResult:
        if self.title_text:
            self.border_title = self.title_text
        yield from self.children_widgets

    def set_title(self, title: str) -> None:
        self.title_text = build_border_title(self.title_icon, title)
        self.border_title = self.title_text
