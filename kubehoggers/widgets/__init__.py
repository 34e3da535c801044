"""Widgets module.

This module provides all reusable widgets organized into submodules:
- data: Data display widgets (tables)
- display: Display widgets (CustomGauge, CustomStatic)
"""

# Data display widgets
from kubehoggers.widgets.data import CustomDataTable

# Display widgets
from kubehoggers.widgets.display import CustomGauge, CustomStatic

__all__ = [
    "CustomDataTable",
    "CustomGauge",
    "CustomStatic",
]
