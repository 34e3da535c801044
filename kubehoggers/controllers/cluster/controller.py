"""Cluster controller for node and pod data operations.

Lists nodes and pods through kubectl, resolves single pods to their node and
builds the per-node reservation report.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress

from kubehoggers.controllers.base import (
    BaseController,
    KubectlError,
    ResolutionError,
    UpstreamListingError,
)
from kubehoggers.controllers.cluster.aggregator import NodeAggregator
from kubehoggers.controllers.cluster.parsers import NodeParser, PodParser
from kubehoggers.models.core.node_aggregate import NodeAggregate
from kubehoggers.models.core.node_info import NodeInfo
from kubehoggers.models.core.pod_info import PodInfo

logger = logging.getLogger(__name__)


class ClusterController(BaseController):
    """Node and pod data operations against the cluster API."""

    SOURCE_NODES = "nodes"
    SOURCE_PODS = "pods"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._node_parser = NodeParser()
        self._pod_parser = PodParser()
        self._aggregator = NodeAggregator()

    @staticmethod
    def _notify_progress(
        progress_callback: Callable[[int, int], None] | None,
        current: int,
        total: int,
    ) -> None:
        """Notify progress callback if provided."""
        if progress_callback:
            with suppress(Exception):
                progress_callback(current, total)

    async def list_nodes(self) -> list[NodeInfo]:
        """List all nodes in API order.

        Raises:
            UpstreamListingError: If the node listing fails.
        """
        try:
            payload = await self._run_kubectl_json(("get", "nodes", "-o", "json"))
        except KubectlError as e:
            logger.warning("Node listing failed: %s", e)
            raise UpstreamListingError(self.SOURCE_NODES, str(e)) from e
        return self._node_parser.parse_node_list(payload)

    async def list_pods(self, node_name: str | None = None) -> list[PodInfo]:
        """List pods in all namespaces, optionally only those bound to a node.

        Raises:
            UpstreamListingError: If the pod listing fails.
        """
        args: tuple[str, ...] = ("get", "pods", "--all-namespaces", "-o", "json")
        if node_name is not None:
            args = (*args, f"--field-selector=spec.nodeName={node_name}")
        try:
            payload = await self._run_kubectl_json(args)
        except KubectlError as e:
            logger.warning("Pod listing failed (node=%s): %s", node_name, e)
            raise UpstreamListingError(self.SOURCE_PODS, str(e)) from e
        return self._pod_parser.parse_pod_list(payload)

    async def get_pod(self, namespace: str, name: str) -> PodInfo:
        """Fetch a single pod.

        Raises:
            ResolutionError: If the pod cannot be fetched.
        """
        try:
            payload = await self._run_kubectl_json(
                ("get", "pod", name, "--namespace", namespace, "-o", "json")
            )
        except KubectlError as e:
            logger.warning("Fetching pod %s/%s failed: %s", namespace, name, e)
            raise ResolutionError(namespace, name, str(e)) from e
        return self._pod_parser.parse_pod_info(payload)

    async def get_pod_node(self, namespace: str, name: str) -> str:
        """Return the node a pod is assigned to, or "" when not yet scheduled."""
        pod = await self.get_pod(namespace, name)
        return pod.node_name or ""

    async def fetch_node_report(
        self,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> list[NodeAggregate]:
        """Build one NodeAggregate per node.

        Any listing failure aborts the whole report; no partial result is
        returned.

        Args:
            progress_callback: Optional ``(nodes_done, nodes_total)`` callback.

        Raises:
            UpstreamListingError: If the node or any pod listing fails.
        """
        nodes = await self.list_nodes()
        total = len(nodes)
        self._notify_progress(progress_callback, 0, total)

        pods_by_node: dict[str, list[PodInfo]] = {}
        for index, node in enumerate(nodes, start=1):
            pods_by_node[node.name] = await self.list_pods(node_name=node.name)
            self._notify_progress(progress_callback, index, total)

        return self._aggregator.aggregate(nodes, pods_by_node)
