# ♥♥─── Statistics Panel ─────────────────────────────────────────────────────────
from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Label, ProgressBar
from textual.containers import Horizontal

from tasktui.ui import icons
from tasktui.i18n import TextKey
from tasktui.core.models import ChangeKind

from .donut_chart import DonutChart
from .dashboard_panels import Panel, StatTile


if TYPE_CHECKING:
    from textual.app import ComposeResult

    from tasktui.core.events import StateChanged, Unsubscribe
    from tasktui.core.app_state import AppState


class StatsPanel(Panel):
    """Chart, counters and progress bar for the current task collection."""

    def __init__(self, state: AppState, **kwargs) -> None:
        super().__init__(title=state.text(TextKey.STATISTICS), title_icon=icons.CHART, **kwargs)
        self.app_state = state
        self._unsubscribe: Unsubscribe | None = None

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield DonutChart(id="chart")
        with Horizontal(classes="stat-pair"):
            yield StatTile(label="", element_id="completed-count", css_classes="-completed")
            yield StatTile(label="", element_id="pending-count", css_classes="-pending")
        yield StatTile(label="", element_id="total-count", css_classes="-total")
        yield Label("", id="progress-label", markup=False)
        yield ProgressBar(total=100, show_eta=False, show_percentage=True, id="progress-bar")

    def on_mount(self) -> None:
        self._unsubscribe = self.app_state.subscribe(self._on_state_changed)
        self.refresh_stats()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_state_changed(self, event: StateChanged) -> None:
        if event.kind in {ChangeKind.TASKS, ChangeKind.LANGUAGE}:
            self.refresh_stats()

    def refresh_stats(self) -> None:
        """Recompute statistics and push them into every child widget."""
        state = self.app_state
        stats = state.stats
        self.set_title(state.text(TextKey.STATISTICS))
        self.query_one(DonutChart).show(stats.completed, stats.pending, state.language)
        self.query_one("#completed-count", StatTile).update_tile(state.text(TextKey.COMPLETED_TASKS), stats.completed)
        self.query_one("#pending-count", StatTile).update_tile(state.text(TextKey.PENDING_TASKS), stats.pending)
        self.query_one("#total-count", StatTile).update_tile(state.text(TextKey.TOTAL_TASKS), stats.total)
        self.query_one("#progress-label", Label).update(state.text(TextKey.PROGRESS))
        self.query_one("#progress-bar", ProgressBar).update(total=100, progress=stats.progress_display)
