"""Metrics controller - reads live pod usage from the metrics API."""

from __future__ import annotations

import logging

from kubehoggers.constants.values import METRICS_SERVER_HINT, POD_METRICS_API_PATH
from kubehoggers.controllers.base import (
    BaseController,
    KubectlError,
    UpstreamListingError,
)
from kubehoggers.controllers.metrics.parsers import PodMetricsParser
from kubehoggers.models.core.pod_usage import PodUsageSample

logger = logging.getLogger(__name__)


class MetricsController(BaseController):
    """Pod usage operations against ``metrics.k8s.io`` (needs metrics-server)."""

    SOURCE_POD_METRICS = "pod metrics"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._parser = PodMetricsParser()

    async def list_pod_metrics(self) -> list[PodUsageSample]:
        """List current usage for every pod in the cluster.

        Raises:
            UpstreamListingError: If the metrics API cannot be queried.
        """
        try:
            payload = await self._run_kubectl_json(("get", "--raw", POD_METRICS_API_PATH))
        except KubectlError as e:
            logger.warning("Pod metrics listing failed: %s", e)
            raise UpstreamListingError(
                self.SOURCE_POD_METRICS, str(e), hint=METRICS_SERVER_HINT
            ) from e
        return self._parser.parse_pod_metrics_list(payload)
