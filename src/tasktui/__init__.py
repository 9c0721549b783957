"""TaskTUI: a terminal to-do list with statistics, themes and translations."""

__version__ = "0.1.0"
