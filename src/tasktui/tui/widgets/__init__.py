from __future__ import annotations

from .task_list import TaskRow, TaskListView
from .donut_chart import DonutChart
from .stats_panel import StatsPanel
from .dashboard_panels import Panel, StatTile


__all__ = ["DonutChart", "Panel", "StatTile", "StatsPanel", "TaskListView", "TaskRow"]
