"""Init file for metrics module."""

from kubehoggers.controllers.metrics.controller import MetricsController
from kubehoggers.controllers.metrics.ranker import (
    PodUsageRanker,
    RefreshLoop,
    rank_by_cpu,
)

__all__ = ["MetricsController", "PodUsageRanker", "RefreshLoop", "rank_by_cpu"]
