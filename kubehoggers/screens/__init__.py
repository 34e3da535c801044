"""Screens module.

- base_screen: BaseScreen shared by all screens
- report: ReportScreen, the per-node reservations and limits snapshot
- top: TopScreen, the live top pods view
"""

from kubehoggers.screens.base_screen import BaseScreen
from kubehoggers.screens.report import ReportScreen
from kubehoggers.screens.top import TopScreen

__all__ = ["BaseScreen", "ReportScreen", "TopScreen"]
