"""Top screen package."""

from kubehoggers.screens.top.top_screen import TopScreen

__all__ = ["TopScreen"]
