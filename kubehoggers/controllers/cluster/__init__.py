"""Init file for cluster module."""

from kubehoggers.controllers.cluster.aggregator import NodeAggregator
from kubehoggers.controllers.cluster.controller import ClusterController
from kubehoggers.controllers.cluster.parsers import NodeParser, PodParser

__all__ = ["ClusterController", "NodeAggregator", "NodeParser", "PodParser"]
