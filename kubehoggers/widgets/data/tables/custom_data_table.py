"""CustomDataTable widget - standardized wrapper around Textual's DataTable."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from textual.containers import Container
from textual.widgets import DataTable as TextualDataTable

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CustomDataTable(Container):
    """Standardized data table wrapper around Textual's DataTable widget.

    Rows are always replaced as a whole, so a table never shows a mix of
    two refreshes.

    CSS Classes: widget-custom-data-table

    Example:
        ```python
        table = CustomDataTable(
            columns=[("namespace", "namespace"), ("name", "name")],
            id="pods-table",
        )
        ```
    """

    DEFAULT_CSS = """
    CustomDataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        min-height: 3;
        background: $surface;
    }
    CustomDataTable > DataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        border: none;
        background: transparent;
        color: $success;
    }
    """

    def __init__(
        self,
        columns: list[tuple[str, str]] | None = None,
        *,
        id: str | None = None,
        classes: str = "",
        zebra_stripes: bool = False,
    ) -> None:
        """Initialize the custom data table wrapper.

        Args:
            columns: Optional list of (label, key) column definitions.
            id: Widget ID.
            classes: CSS classes (widget-custom-data-table is automatically added).
            zebra_stripes: Whether to display alternating row colors.
        """
        super().__init__(id=id, classes=f"widget-custom-data-table {classes}".strip())
        self._columns = columns or []
        self._zebra_stripes = zebra_stripes
        self._inner_widget: TextualDataTable | None = None

    def compose(self) -> ComposeResult:
        """Compose the data table with Textual's DataTable widget."""
        table = TextualDataTable(cursor_type="none", zebra_stripes=self._zebra_stripes)
        self._inner_widget = table
        yield table

        for label, key in self._columns:
            table.add_column(label, key=key)

    @property
    def data_table(self) -> TextualDataTable | None:
        """Get the underlying Textual DataTable widget.

        Returns:
            The composed Textual DataTable widget, or None if not yet composed.
        """
        return self._inner_widget

    @property
    def row_count(self) -> int:
        if self._inner_widget is None:
            return 0
        return self._inner_widget.row_count

    def get_row_at(self, row_index: int) -> list[object]:
        """Return the cell values of one row."""
        if self._inner_widget is None:
            raise IndexError(row_index)
        return list(self._inner_widget.get_row_at(row_index))

    def set_rows(self, rows: Iterable[Sequence[str]]) -> None:
        """Replace all rows, keeping the columns."""
        table = self._inner_widget
        if table is None:
            logger.debug("set_rows called before %s was composed", self.id)
            return
        table.clear()
        table.add_rows(rows)
