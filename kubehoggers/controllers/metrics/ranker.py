"""Pod usage ranking and the live view refresh loop.

One refresh cycle fetches usage for every pod, keeps the top K by CPU, then
resolves the node of each kept pod. ``RefreshLoop`` repeats cycles on a fixed
interval until stopped. Neither class touches widgets: results and progress go
out through callbacks, and the screen that owns the display decides how to
render them.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from datetime import datetime, timezone
from typing import Protocol

from kubehoggers.constants.defaults import ROWS_LIMIT_DEFAULT
from kubehoggers.constants.enums import RefreshPhase
from kubehoggers.controllers.base.errors import HoggersError
from kubehoggers.models.core.pod_usage import PodUsageSample, TopSnapshot

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class PodMetricsSource(Protocol):
    async def list_pod_metrics(self) -> list[PodUsageSample]: ...


class PodNodeResolver(Protocol):
    async def get_pod_node(self, namespace: str, name: str) -> str: ...


def rank_by_cpu(samples: Iterable[PodUsageSample], limit: int) -> list[PodUsageSample]:
    """Return the ``limit`` samples using the most CPU, highest first.

    The sort is stable, so pods with equal CPU usage keep their input order.
    """
    ranked = sorted(samples, key=lambda sample: sample.cpu_usage, reverse=True)
    return ranked[: max(0, limit)]


class PodUsageRanker:
    """Runs single top-K refresh cycles."""

    def __init__(
        self,
        metrics: PodMetricsSource,
        resolver: PodNodeResolver,
        rows_limit: int = ROWS_LIMIT_DEFAULT,
    ) -> None:
        self._metrics = metrics
        self._resolver = resolver
        self.rows_limit = rows_limit
        self.phase = RefreshPhase.IDLE

    async def refresh(
        self,
        on_progress: ProgressCallback | None = None,
        should_stop: Callable[[], bool] | None = None,
    ) -> TopSnapshot | None:
        """Run one cycle and return its snapshot.

        Args:
            on_progress: Called with ``(resolved, total)``, first with zero
                resolved and then after every resolved pod.
            should_stop: Polled before every upstream call. When it returns
                True the cycle ends early and None is returned.

        Raises:
            UpstreamListingError: If listing pod metrics fails.
            ResolutionError: If a kept pod's node cannot be fetched.
        """

        def stopped() -> bool:
            return should_stop is not None and should_stop()

        def progress(current: int, total: int) -> None:
            if on_progress is not None and not stopped():
                on_progress(current, total)

        if stopped():
            return None

        try:
            self.phase = RefreshPhase.FETCHING
            samples = await self._metrics.list_pod_metrics()
            top = rank_by_cpu(samples, self.rows_limit)
            total = len(top)
            logger.debug("Fetched %d pod samples, resolving top %d", len(samples), total)

            # (0, 0) already means done to the gauge when nothing is kept
            self.phase = RefreshPhase.RESOLVING
            progress(0, total)
            rows: list[PodUsageSample] = []
            for sample in top:
                if stopped():
                    return None
                node_name = await self._resolver.get_pod_node(sample.namespace, sample.name)
                rows.append(sample.model_copy(update={"node_name": node_name}))
                progress(len(rows), total)
        finally:
            self.phase = RefreshPhase.IDLE

        return TopSnapshot(
            rows=rows,
            total_pods=len(samples),
            refreshed_at=datetime.now(timezone.utc),
        )


class RefreshLoop:
    """Cooperative refresh loop: fetch, resolve, render, sleep, repeat.

    Args:
        ranker: Runs each cycle.
        interval: Seconds to sleep between cycles.
        abort_on_error: Re-raise a failed cycle's error (ending the loop) when
            True, otherwise report it and try again after the interval.
        sleep: Awaitable sleep function, replaceable in tests.
    """

    def __init__(
        self,
        ranker: PodUsageRanker,
        interval: float,
        *,
        abort_on_error: bool = True,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._ranker = ranker
        self.interval = interval
        self.abort_on_error = abort_on_error
        self._sleep = sleep
        self._stopped = False
        self._phase = RefreshPhase.IDLE
        self.cycles = 0

    @property
    def phase(self) -> RefreshPhase:
        """Current phase, including the ranker's progress within a cycle."""
        if self._phase is RefreshPhase.FETCHING and self._ranker.phase is not RefreshPhase.IDLE:
            return self._ranker.phase
        return self._phase

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        """Stop issuing upstream calls, progress events and renders."""
        self._stopped = True

    async def run(
        self,
        on_snapshot: Callable[[TopSnapshot], None],
        on_progress: ProgressCallback | None = None,
        on_error: Callable[[HoggersError], None] | None = None,
    ) -> None:
        """Run cycles until stopped.

        Raises:
            HoggersError: The first failed cycle's error when ``abort_on_error``.
        """
        try:
            while not self._stopped:
                self._phase = RefreshPhase.FETCHING
                try:
                    snapshot = await self._ranker.refresh(
                        on_progress=on_progress,
                        should_stop=lambda: self._stopped,
                    )
                except HoggersError as e:
                    if self.abort_on_error:
                        raise
                    logger.warning("Refresh cycle failed, retrying in %ss: %s", self.interval, e)
                    if on_error is not None and not self._stopped:
                        on_error(e)
                else:
                    if snapshot is None or self._stopped:
                        break
                    self._phase = RefreshPhase.RENDERING
                    on_snapshot(snapshot)
                    self.cycles += 1
                    logger.debug("Refresh cycle %d rendered", self.cycles)

                if self._stopped:
                    break
                self._phase = RefreshPhase.SLEEPING
                await self._sleep(self.interval)
        finally:
            self._phase = RefreshPhase.IDLE
