"""Controllers module.

This module provides domain-driven controllers for fetching and aggregating
Kubernetes cluster and metrics data.
"""

from __future__ import annotations

# Base classes
from kubehoggers.controllers.base import (
    BaseController,
    HoggersError,
    KubectlError,
    ResolutionError,
    UpstreamListingError,
)

# Cluster domain
from kubehoggers.controllers.cluster import ClusterController, NodeAggregator

# Metrics domain
from kubehoggers.controllers.metrics import (
    MetricsController,
    PodUsageRanker,
    RefreshLoop,
    rank_by_cpu,
)

__all__ = [
    # Base
    "BaseController",
    # Domain Controllers
    "ClusterController",
    # Errors
    "HoggersError",
    "KubectlError",
    "MetricsController",
    "NodeAggregator",
    "PodUsageRanker",
    "RefreshLoop",
    "ResolutionError",
    "UpstreamListingError",
    "rank_by_cpu",
]
