"""Report screen - static table of reservations and limits per node."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Footer

from kubehoggers.controllers.cluster.controller import ClusterController
from kubehoggers.screens.base_screen import BaseScreen
from kubehoggers.screens.report.config import (
    NODE_REPORT_COLUMNS,
    NODES_TABLE_ID,
    REPORT_SCREEN_TITLE,
    REPORT_TITLE,
    REPORT_TITLE_ID,
)
from kubehoggers.screens.report.presenter import (
    NodeReportLoaded,
    NodeReportLoadFailed,
    NodeReportProgress,
    ReportPresenter,
)
from kubehoggers.widgets import CustomDataTable, CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult


class ReportScreen(BaseScreen):
    """Shows one snapshot of requests and limits against node capacity."""

    def __init__(self, controller: ClusterController) -> None:
        super().__init__()
        self._presenter = ReportPresenter(self, controller)

    @property
    def screen_title(self) -> str:
        return REPORT_SCREEN_TITLE

    def compose(self) -> ComposeResult:
        yield CustomStatic(REPORT_TITLE, id=REPORT_TITLE_ID, classes="title")
        yield from self.compose_status("Listing nodes...")
        yield CustomDataTable(columns=NODE_REPORT_COLUMNS, id=NODES_TABLE_ID)
        yield Footer()

    def load_data(self) -> None:
        self._presenter.load_data()

    def on_node_report_progress(self, event: NodeReportProgress) -> None:
        self.set_status(f"Listing pods ({event.current}/{event.total} nodes)...")

    def on_node_report_loaded(self, event: NodeReportLoaded) -> None:
        table = self.query_one(f"#{NODES_TABLE_ID}", CustomDataTable)
        table.set_rows(self._presenter.format_rows(event.aggregates))
        self.set_status(f"{len(event.aggregates)} nodes")

    def on_node_report_load_failed(self, event: NodeReportLoadFailed) -> None:
        self.abort(event.error)
