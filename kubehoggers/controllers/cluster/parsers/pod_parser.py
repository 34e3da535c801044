"""Pod parser for cluster controller - parses pod specs into resource models."""

from __future__ import annotations

from typing import Any

from kubehoggers.models.core.pod_info import ContainerResources, PodInfo
from kubehoggers.utils.resource_parser import parse_cpu_millicores, parse_memory_bytes


class PodParser:
    """Parses pod data into structured formats."""

    @staticmethod
    def _optional_cpu(values: dict[str, Any], key: str = "cpu") -> int | None:
        if key not in values:
            return None
        return parse_cpu_millicores(values[key])

    @staticmethod
    def _optional_memory(values: dict[str, Any], key: str = "memory") -> int | None:
        if key not in values:
            return None
        return parse_memory_bytes(values[key])

    def parse_container(self, container: dict[str, Any]) -> ContainerResources:
        """Parse one container spec, keeping undeclared values as None."""
        resources = container.get("resources") or {}
        requests = resources.get("requests") or {}
        limits = resources.get("limits") or {}
        return ContainerResources(
            name=container.get("name", ""),
            cpu_request=self._optional_cpu(requests),
            memory_request=self._optional_memory(requests),
            cpu_limit=self._optional_cpu(limits),
            memory_limit=self._optional_memory(limits),
        )

    def parse_pod_info(self, pod: dict[str, Any]) -> PodInfo:
        """Parse a single pod into PodInfo.

        Only regular containers count; init containers do not hold resources
        for the lifetime of the pod.
        """
        metadata = pod.get("metadata", {})
        spec = pod.get("spec", {})
        return PodInfo(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            node_name=spec.get("nodeName") or None,
            containers=[self.parse_container(c) for c in spec.get("containers", [])],
        )

    def parse_pod_list(self, payload: dict[str, Any]) -> list[PodInfo]:
        """Parse a ``PodList`` document."""
        return [self.parse_pod_info(item) for item in payload.get("items", [])]
