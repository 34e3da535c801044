"""Display widgets."""

from kubehoggers.widgets.display.custom_gauge import CustomGauge
from kubehoggers.widgets.display.custom_static import CustomStatic

__all__ = ["CustomGauge", "CustomStatic"]
