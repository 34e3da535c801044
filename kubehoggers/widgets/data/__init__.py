"""Data display widgets."""

from kubehoggers.widgets.data.tables import CustomDataTable

__all__ = ["CustomDataTable"]
