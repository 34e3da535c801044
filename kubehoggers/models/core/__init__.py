"""Core cluster data models."""

from kubehoggers.models.core.node_aggregate import NodeAggregate
from kubehoggers.models.core.node_info import NodeInfo
from kubehoggers.models.core.pod_info import ContainerResources, PodInfo
from kubehoggers.models.core.pod_usage import PodUsageSample, TopSnapshot

__all__ = [
    "ContainerResources",
    "NodeAggregate",
    "NodeInfo",
    "PodInfo",
    "PodUsageSample",
    "TopSnapshot",
]
