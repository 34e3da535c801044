"""Parsers for metrics API documents."""

from kubehoggers.controllers.metrics.parsers.metrics_parser import PodMetricsParser

__all__ = ["PodMetricsParser"]
