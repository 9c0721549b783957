# ♥♥─── Donut Chart Widget ───────────────────────────────────────────────────────
from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Static

from tasktui.tui.chart import ChartState, ChartRenderer


if TYPE_CHECKING:
    from tasktui.core.models import Language


class DonutChart(Static):
    """Shows the completed/pending donut, or a placeholder with no tasks."""

    def __init__(self, renderer: ChartRenderer | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.renderer = renderer or ChartRenderer()

    @property
    def chart_state(self) -> ChartState:
        return self.renderer.state

    def show(self, completed: int, pending: int, language: Language) -> None:
        """Redraw for new counts or a new language."""
        self.update(self.renderer.render(completed, pending, language))
        self.set_class(self.renderer.state is ChartState.PLACEHOLDER, "-placeholder")

    def on_unmount(self) -> None:
        self.renderer.destroy()
