"""Report screen package."""

from kubehoggers.screens.report.report_screen import ReportScreen

__all__ = ["ReportScreen"]
