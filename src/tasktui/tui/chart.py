# ♥♥─── Donut Chart ──────────────────────────────────────────────────────────────
"""Terminal donut chart of completed versus pending tasks.

:class:`DonutCanvas` is the drawing context: a cell buffer that has to be
opened before drawing and closed afterwards. :class:`ChartRenderer` owns at
most one open canvas at a time. Every render closes the previous canvas
before opening the next one, and :meth:`ChartRenderer.destroy` closes
whatever is still open.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import TYPE_CHECKING, Self

from rich.text import Text
from rich.align import Align
from rich.console import Group

from tasktui.i18n import TextKey, lookup
from tasktui.core.errors import ChartError
from tasktui.custom_logger import log


if TYPE_CHECKING:
    from types import TracebackType

    from rich.console import RenderableType

    from tasktui.core.models import Language


COMPLETED_COLOR = "#48bb78"
PENDING_COLOR = "#9f7aea"
SEGMENT_CHAR = "█"
LEGEND_MARK = "●"


class ChartState(StrEnum):
    """Lifecycle of a :class:`ChartRenderer`."""

    UNINITIALIZED = "uninitialized"
    RENDERED = "rendered"
    PLACEHOLDER = "placeholder"
    DESTROYED = "destroyed"


# ─── Drawing Context ──────────────────────────────────────────────────────────
class DonutCanvas:
    """A fixed-size grid of styled cells."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            msg = f"Canvas size must be positive, got {width}x{height}"
            raise ValueError(msg)
        self.width = width
        self.height = height
        self._cells: list[list[tuple[str, str | None]]] | None = None

    @property
    def is_open(self) -> bool:
        return self._cells is not None

    def open(self) -> Self:
        if self.is_open:
            msg = "Canvas is already open"
            raise ChartError(msg)
        self._cells = [[(" ", None)] * self.width for _ in range(self.height)]
        return self

    def close(self) -> None:
        self._cells = None

    def _require_cells(self) -> list[list[tuple[str, str | None]]]:
        if self._cells is None:
            msg = "Canvas is not open"
            raise ChartError(msg)
        return self._cells

    def plot(self, x: int, y: int, char: str, style: str | None = None) -> None:
        cells = self._require_cells()
        if 0 <= x < self.width and 0 <= y < self.height:
            cells[y][x] = (char, style)

    def to_text(self) -> Text:
        """Copy the grid into a rich Text; the copy outlives the canvas."""
        cells = self._require_cells()
        text = Text(no_wrap=True, overflow="crop")
        for row_index, row in enumerate(cells):
            if row_index:
                text.append("\n")
            for char, style in row:
                text.append(char, style=style)
        return text


# ─── Renderer ─────────────────────────────────────────────────────────────────
class ChartRenderer:
    """Renders the completed/pending donut and manages its canvas.

    Terminal cells are roughly twice as tall as they are wide, so the
    default width is twice the height to keep the ring round.
    """

    def __init__(self, width: int = 24, height: int = 11, cutout: float = 0.55) -> None:
        if not 0 <= cutout < 1:
            msg = f"cutout must be in [0, 1), got {cutout}"
            raise ValueError(msg)
        self.width = width
        self.height = height
        self.cutout = cutout
        self.state = ChartState.UNINITIALIZED
        self._canvas: DonutCanvas | None = None
        self.canvases_opened = 0

    @property
    def live_contexts(self) -> int:
        """Number of canvases currently open, never more than one."""
        return 1 if self._canvas is not None and self._canvas.is_open else 0

    def render(self, completed: int, pending: int, language: Language | str) -> RenderableType:
        """Draw the chart for the given counts.

        :param completed: Number of completed tasks.
        :param pending: Number of pending tasks.
        :param language: Language of the legend or placeholder.
        :returns: The chart with its legend, or the placeholder message when
            both counts are zero.
        :raises ChartError: If the renderer was destroyed.
        :raises ValueError: If a count is negative.
        """
        if self.state is ChartState.DESTROYED:
            msg = "Cannot render a destroyed chart"
            raise ChartError(msg)
        if completed < 0 or pending < 0:
            msg = f"Counts must not be negative, got {completed}/{pending}"
            raise ValueError(msg)

        self._release()

        if completed == 0 and pending == 0:
            self.state = ChartState.PLACEHOLDER
            return Align.center(Text(lookup(language, TextKey.CHART_PLACEHOLDER), style="italic dim"))

        canvas = DonutCanvas(self.width, self.height).open()
        self._canvas = canvas
        self.canvases_opened += 1
        try:
            self._draw(canvas, completed, pending)
            body = canvas.to_text()
        except Exception:
            self._release()
            raise

        self.state = ChartState.RENDERED
        return Group(Align.center(body), Align.center(self._legend(completed, pending, language)))

    def destroy(self) -> None:
        """Release the canvas; the renderer cannot be used afterwards."""
        self._release()
        if self.state is not ChartState.DESTROYED:
            log.debug("Chart destroyed after {} renders.", self.canvases_opened)
        self.state = ChartState.DESTROYED

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.destroy()

    # ─── Internals ────────────────────────────────────────────────────────────
    def _release(self) -> None:
        if self._canvas is not None:
            self._canvas.close()
            self._canvas = None

    def _draw(self, canvas: DonutCanvas, completed: int, pending: int) -> None:
        completed_share = completed / (completed + pending)
        half_width = canvas.width / 2
        half_height = canvas.height / 2
        for y in range(canvas.height):
            dy = (y + 0.5 - half_height) / half_height
            for x in range(canvas.width):
                dx = (x + 0.5 - half_width) / half_width
                radius = math.hypot(dx, dy)
                if not self.cutout <= radius <= 1:
                    continue
                # Clockwise from twelve o'clock, completed segment first.
                turn = (math.atan2(dx, -dy) / math.tau) % 1
                color = COMPLETED_COLOR if turn < completed_share else PENDING_COLOR
                canvas.plot(x, y, SEGMENT_CHAR, color)

    @staticmethod
    def _legend(completed: int, pending: int, language: Language | str) -> Text:
        legend = Text()
        legend.append(f"{LEGEND_MARK} ", style=COMPLETED_COLOR)
        legend.append(f"{lookup(language, TextKey.CHART_COMPLETED)} {completed}")
        legend.append("   ")
        legend.append(f"{LEGEND_MARK} ", style=PENDING_COLOR)
        legend.append(f"{lookup(language, TextKey.CHART_PENDING)} {pending}")
        return legend
