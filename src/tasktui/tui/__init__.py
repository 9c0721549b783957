from __future__ import annotations

from .chart import ChartState, DonutCanvas, ChartRenderer
from .main_app import TaskTUI


__all__ = ["ChartRenderer", "ChartState", "DonutCanvas", "TaskTUI"]
