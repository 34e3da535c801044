"""Node parser for cluster controller - parses node data into structured formats."""

from __future__ import annotations

from typing import Any

from kubehoggers.models.core.node_info import NodeInfo
from kubehoggers.utils.resource_parser import parse_cpu_millicores, parse_memory_bytes


class NodeParser:
    """Parses node data into structured formats."""

    def parse_node_info(self, node: dict[str, Any]) -> NodeInfo:
        """Parse a single node into NodeInfo.

        Args:
            node: Raw node dictionary from API

        Returns:
            NodeInfo with allocatable CPU in millicores and memory in bytes.
        """
        metadata = node.get("metadata", {})
        status = node.get("status", {})
        allocatable = status.get("allocatable", {})

        return NodeInfo(
            name=metadata.get("name", "Unknown"),
            cpu_allocatable=parse_cpu_millicores(allocatable.get("cpu", "0")),
            memory_allocatable=parse_memory_bytes(allocatable.get("memory", "0")),
        )

    def parse_node_list(self, payload: dict[str, Any]) -> list[NodeInfo]:
        """Parse a ``NodeList`` document, keeping the API order."""
        return [self.parse_node_info(item) for item in payload.get("items", [])]
