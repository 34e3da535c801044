"""CustomGauge widget - titled progress bar for refresh progress."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Container
from textual.widgets import ProgressBar

from kubehoggers.widgets.display.custom_static import CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CustomGauge(Container):
    """Progress gauge that turns from "Refreshing data" to "Waiting" at 100%.

    CSS Classes: widget-custom-gauge, -refreshing, -waiting
    """

    DEFAULT_CSS = """
    CustomGauge {
        height: auto;
        width: 1fr;
        border: round $warning;
        padding: 0 1;
    }
    CustomGauge.-waiting {
        border: round $success;
    }
    CustomGauge > .gauge-title {
        color: $warning;
    }
    CustomGauge.-waiting > .gauge-title {
        color: $success;
    }
    CustomGauge > ProgressBar {
        width: 1fr;
    }
    """

    TITLE_REFRESHING = "Refreshing data"
    TITLE_WAITING = "Waiting"

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(
            id=id,
            classes=f"widget-custom-gauge -refreshing {classes}".strip(),
        )
        self._percent = 0

    def compose(self) -> ComposeResult:
        yield CustomStatic(self.TITLE_REFRESHING, classes="gauge-title")
        yield ProgressBar(total=100, show_eta=False)

    @property
    def percent(self) -> int:
        return self._percent

    @staticmethod
    def compute_percent(current: int, total: int) -> int:
        """Whole percent of ``current / total``; nothing to do counts as done."""
        if total <= 0:
            return 100
        return min(100, int(current / total * 100))

    def set_progress(self, current: int, total: int) -> int:
        """Show ``current`` of ``total`` and return the resulting percent."""
        percent = self.compute_percent(current, total)
        self._percent = percent
        done = percent == 100
        self.set_class(not done, "-refreshing")
        self.set_class(done, "-waiting")
        self.query_one(".gauge-title", CustomStatic).update(
            self.TITLE_WAITING if done else self.TITLE_REFRESHING
        )
        self.query_one(ProgressBar).update(total=100, progress=percent)
        return percent
