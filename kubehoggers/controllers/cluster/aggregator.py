"""Node aggregation - sums pod requests and limits per node."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from kubehoggers.models.core.node_aggregate import NodeAggregate
from kubehoggers.models.core.node_info import NodeInfo
from kubehoggers.models.core.pod_info import PodInfo

logger = logging.getLogger(__name__)


class NodeAggregator:
    """Builds NodeAggregate rows from nodes and the pods bound to them."""

    def aggregate_node(self, node: NodeInfo, pods: Iterable[PodInfo]) -> NodeAggregate:
        """Sum everything the pods on one node request and may use.

        Requests feed the reserved sums and limits feed the committed sums,
        independently of each other. A pod counts as unrestricted only when
        none of its containers declares any request or limit.
        """
        total_pods = 0
        unrestricted_pods = 0
        reserved_cpu = 0
        reserved_memory = 0
        committed_cpu = 0
        committed_memory = 0

        for pod in pods:
            total_pods += 1
            restricted = False
            for container in pod.containers:
                if container.has_requests:
                    reserved_cpu += container.cpu_request or 0
                    reserved_memory += container.memory_request or 0
                    restricted = True
                if container.has_limits:
                    committed_cpu += container.cpu_limit or 0
                    committed_memory += container.memory_limit or 0
                    restricted = True
            if not restricted:
                unrestricted_pods += 1

        return NodeAggregate(
            name=node.name,
            total_pods=total_pods,
            unrestricted_pods=unrestricted_pods,
            cpu_allocatable=node.cpu_allocatable,
            memory_allocatable=node.memory_allocatable,
            reserved_cpu=reserved_cpu,
            reserved_memory=reserved_memory,
            committed_cpu=committed_cpu,
            committed_memory=committed_memory,
        )

    def aggregate(
        self,
        nodes: Iterable[NodeInfo],
        pods_by_node: Mapping[str, list[PodInfo]],
    ) -> list[NodeAggregate]:
        """Aggregate every node, preserving the node order given."""
        aggregates = [
            self.aggregate_node(node, pods_by_node.get(node.name, []))
            for node in nodes
        ]
        logger.debug("Aggregated %d nodes", len(aggregates))
        return aggregates
