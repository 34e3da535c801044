"""Pod metrics parser - turns metrics.k8s.io documents into usage samples."""

from __future__ import annotations

from typing import Any

from kubehoggers.models.core.pod_usage import PodUsageSample
from kubehoggers.utils.resource_parser import parse_cpu_millicores, parse_memory_bytes


class PodMetricsParser:
    """Parses ``PodMetricsList`` items."""

    def parse_pod_metrics(self, item: dict[str, Any]) -> PodUsageSample:
        """Parse one ``PodMetrics`` item.

        A pod's usage is the sum over its containers, as ``kubectl top pod``
        reports it.
        """
        metadata = item.get("metadata", {})
        cpu_usage = 0
        memory_usage = 0
        for container in item.get("containers", []):
            usage = container.get("usage") or {}
            cpu_usage += parse_cpu_millicores(usage.get("cpu", "0"))
            memory_usage += parse_memory_bytes(usage.get("memory", "0"))

        return PodUsageSample(
            namespace=metadata.get("namespace", ""),
            name=metadata.get("name", ""),
            cpu_usage=cpu_usage,
            memory_usage=memory_usage,
        )

    def parse_pod_metrics_list(self, payload: dict[str, Any]) -> list[PodUsageSample]:
        return [self.parse_pod_metrics(item) for item in payload.get("items", [])]
