"""Top screen presenter - drives the refresh loop and formats its rows.

The presenter never touches widgets. Each callback from the refresh loop is
turned into a message posted to the screen, whose message queue applies them
in order.
"""

from __future__ import annotations

import logging
from typing import Any

from textual.message import Message
from textual.worker import Worker

from kubehoggers.constants.enums import RefreshPhase
from kubehoggers.controllers.base.errors import HoggersError
from kubehoggers.controllers.metrics.ranker import (
    PodMetricsSource,
    PodNodeResolver,
    PodUsageRanker,
    RefreshLoop,
)
from kubehoggers.models.core.pod_usage import PodUsageSample, TopSnapshot
from kubehoggers.screens.top.config import REFRESH_WORKER_NAME
from kubehoggers.utils.formatting import format_cpu_mcores, format_memory_mebibytes

logger = logging.getLogger(__name__)


# =============================================================================
# Worker Messages
# =============================================================================


class ResolutionProgress(Message):
    """Message reporting how many kept pods have been resolved to a node."""

    def __init__(self, current: int, total: int) -> None:
        super().__init__()
        self.current = current
        self.total = total


class TopSnapshotReady(Message):
    """Message carrying one finished refresh cycle."""

    def __init__(self, snapshot: TopSnapshot) -> None:
        super().__init__()
        self.snapshot = snapshot


class RefreshCycleFailed(Message):
    """Message indicating a refresh cycle failed.

    ``fatal`` is True when the loop has ended because of the error.
    """

    def __init__(self, error: HoggersError, fatal: bool) -> None:
        super().__init__()
        self.error = error
        self.fatal = fatal


class TopPresenter:
    """Presenter for TopScreen - owns the refresh loop."""

    def __init__(
        self,
        screen: Any,
        metrics: PodMetricsSource,
        resolver: PodNodeResolver,
        *,
        interval: int,
        rows_limit: int,
        abort_on_error: bool = True,
    ) -> None:
        self._screen = screen
        self._ranker = PodUsageRanker(metrics, resolver, rows_limit=rows_limit)
        self._loop = RefreshLoop(
            self._ranker, interval, abort_on_error=abort_on_error
        )
        self._worker: Worker[None] | None = None

    @property
    def loop(self) -> RefreshLoop:
        return self._loop

    @property
    def phase(self) -> RefreshPhase:
        return self._loop.phase

    @property
    def stopped(self) -> bool:
        return self._loop.stopped

    def start(self) -> None:
        """Start the refresh loop in a worker."""
        self._worker = self._screen.run_worker(
            self._refresh_worker, name=REFRESH_WORKER_NAME, exclusive=True
        )

    def stop(self) -> None:
        """Stop the loop; nothing is posted to the screen afterwards."""
        if self._loop.stopped:
            return
        logger.debug("Stopping refresh loop after %d cycles", self._loop.cycles)
        self._loop.stop()
        if self._worker is not None and not self._worker.is_finished:
            self._worker.cancel()

    def _post(self, message: Message) -> None:
        if not self._loop.stopped:
            self._screen.post_message(message)

    async def _refresh_worker(self) -> None:
        try:
            await self._loop.run(
                on_snapshot=lambda snapshot: self._post(TopSnapshotReady(snapshot)),
                on_progress=lambda current, total: self._post(
                    ResolutionProgress(current, total)
                ),
                on_error=lambda error: self._post(RefreshCycleFailed(error, fatal=False)),
            )
        except HoggersError as e:
            logger.exception("Refresh loop aborted")
            self._post(RefreshCycleFailed(e, fatal=True))

    @staticmethod
    def format_row(sample: PodUsageSample) -> tuple[str, ...]:
        return (
            sample.namespace,
            sample.name,
            sample.node_name or "",
            format_cpu_mcores(sample.cpu_usage),
            format_memory_mebibytes(sample.memory_usage),
        )

    @classmethod
    def format_rows(cls, snapshot: TopSnapshot) -> list[tuple[str, ...]]:
        """Table rows in rank order."""
        return [cls.format_row(sample) for sample in snapshot.rows]

    @staticmethod
    def format_status(snapshot: TopSnapshot) -> str:
        refreshed = snapshot.refreshed_at.astimezone().strftime("%H:%M:%S")
        return (
            f"Top {len(snapshot.rows)} of {snapshot.total_pods} pods, "
            f"refreshed at {refreshed}"
        )
