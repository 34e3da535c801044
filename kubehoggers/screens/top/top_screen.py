"""Top screen - live view of the pods using the most CPU."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Footer

from kubehoggers.constants.defaults import ABORT_ON_CYCLE_ERROR_DEFAULT
from kubehoggers.controllers.metrics.ranker import PodMetricsSource, PodNodeResolver
from kubehoggers.models.core.pod_usage import TopSnapshot
from kubehoggers.screens.base_screen import BaseScreen
from kubehoggers.screens.top.config import (
    PODS_TABLE_ID,
    REFRESH_GAUGE_ID,
    TOP_PODS_COLUMNS,
    TOP_SCREEN_TITLE,
    TOP_TITLE_ID,
    format_top_title,
)
from kubehoggers.screens.top.presenter import (
    RefreshCycleFailed,
    ResolutionProgress,
    TopPresenter,
    TopSnapshotReady,
)
from kubehoggers.widgets import CustomDataTable, CustomGauge, CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult


class TopScreen(BaseScreen):
    """Refreshes the top pods table on a fixed interval.

    This screen is the only place refresh results are rendered.
    """

    def __init__(
        self,
        metrics: PodMetricsSource,
        resolver: PodNodeResolver,
        *,
        interval: int,
        rows_limit: int,
        abort_on_error: bool = ABORT_ON_CYCLE_ERROR_DEFAULT,
    ) -> None:
        super().__init__()
        self.interval = interval
        self._presenter = TopPresenter(
            self,
            metrics,
            resolver,
            interval=interval,
            rows_limit=rows_limit,
            abort_on_error=abort_on_error,
        )
        self.rendered_cycles = 0

    @property
    def screen_title(self) -> str:
        return TOP_SCREEN_TITLE

    @property
    def presenter(self) -> TopPresenter:
        return self._presenter

    def compose(self) -> ComposeResult:
        yield CustomStatic(
            format_top_title(self.interval), id=TOP_TITLE_ID, classes="title"
        )
        yield CustomGauge(id=REFRESH_GAUGE_ID)
        yield from self.compose_status("Fetching pod metrics...")
        yield CustomDataTable(columns=TOP_PODS_COLUMNS, id=PODS_TABLE_ID)
        yield Footer()

    def load_data(self) -> None:
        self._presenter.start()

    def apply_snapshot(self, snapshot: TopSnapshot) -> None:
        """Render one whole refresh cycle."""
        with self.app.batch_update():
            table = self.query_one(f"#{PODS_TABLE_ID}", CustomDataTable)
            table.set_rows(self._presenter.format_rows(snapshot))
            gauge = self.query_one(f"#{REFRESH_GAUGE_ID}", CustomGauge)
            gauge.set_progress(len(snapshot.rows), len(snapshot.rows))
            self.set_status(self._presenter.format_status(snapshot))
        self.rendered_cycles += 1

    def on_resolution_progress(self, event: ResolutionProgress) -> None:
        if self._presenter.stopped:
            return
        gauge = self.query_one(f"#{REFRESH_GAUGE_ID}", CustomGauge)
        gauge.set_progress(event.current, event.total)

    def on_top_snapshot_ready(self, event: TopSnapshotReady) -> None:
        if self._presenter.stopped:
            return
        self.apply_snapshot(event.snapshot)

    def on_refresh_cycle_failed(self, event: RefreshCycleFailed) -> None:
        if event.fatal:
            self.abort(event.error)
            return
        if not self._presenter.stopped:
            self.set_status(str(event.error), is_error=True)

    def prepare_for_exit(self) -> None:
        self._presenter.stop()

    def on_unmount(self) -> None:
        self._presenter.stop()
