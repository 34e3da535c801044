"""Parsers turning raw kubectl JSON into cluster models."""

from kubehoggers.controllers.cluster.parsers.node_parser import NodeParser
from kubehoggers.controllers.cluster.parsers.pod_parser import PodParser

__all__ = ["NodeParser", "PodParser"]
