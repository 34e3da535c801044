"""Report screen presenter - data loading and row formatting."""

from __future__ import annotations

import logging
from typing import Any

from textual.message import Message

from kubehoggers.controllers.base.errors import HoggersError
from kubehoggers.controllers.cluster.controller import ClusterController
from kubehoggers.models.core.node_aggregate import NodeAggregate
from kubehoggers.utils.formatting import format_percentage

logger = logging.getLogger(__name__)


# =============================================================================
# Worker Messages
# =============================================================================


class NodeReportProgress(Message):
    """Message reporting how many nodes have had their pods listed."""

    def __init__(self, current: int, total: int) -> None:
        super().__init__()
        self.current = current
        self.total = total


class NodeReportLoaded(Message):
    """Message carrying the finished node report."""

    def __init__(self, aggregates: list[NodeAggregate]) -> None:
        super().__init__()
        self.aggregates = aggregates


class NodeReportLoadFailed(Message):
    """Message indicating the node report could not be built."""

    def __init__(self, error: HoggersError) -> None:
        super().__init__()
        self.error = error


class ReportPresenter:
    """Presenter for ReportScreen - handles data loading and formatting."""

    def __init__(self, screen: Any, controller: ClusterController) -> None:
        self._screen = screen
        self._controller = controller
        self._aggregates: list[NodeAggregate] = []

    @property
    def aggregates(self) -> list[NodeAggregate]:
        return list(self._aggregates)

    def load_data(self) -> None:
        """Start loading the node report."""
        self._screen.run_worker(
            self._load_report_worker, name="node-report", exclusive=True
        )

    async def _load_report_worker(self) -> None:
        def on_progress(current: int, total: int) -> None:
            self._screen.post_message(NodeReportProgress(current, total))

        try:
            aggregates = await self._controller.fetch_node_report(on_progress)
        except HoggersError as e:
            logger.exception("Failed to build node report")
            self._screen.post_message(NodeReportLoadFailed(e))
            return

        self._aggregates = aggregates
        self._screen.post_message(NodeReportLoaded(aggregates))

    @staticmethod
    def format_row(aggregate: NodeAggregate) -> tuple[str, ...]:
        return (
            aggregate.name,
            str(aggregate.total_pods),
            str(aggregate.unrestricted_pods),
            format_percentage(aggregate.reserved_cpu_fraction),
            format_percentage(aggregate.committed_cpu_fraction),
            format_percentage(aggregate.reserved_memory_fraction),
            format_percentage(aggregate.committed_memory_fraction),
        )

    @classmethod
    def format_rows(cls, aggregates: list[NodeAggregate]) -> list[tuple[str, ...]]:
        """Table rows in node order."""
        return [cls.format_row(aggregate) for aggregate in aggregates]
