"""Tests for cluster controller."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from kubehoggers.controllers.base import KubectlError, ResolutionError, UpstreamListingError
from kubehoggers.controllers.cluster.controller import ClusterController
from kubehoggers.utils.formatting import format_percentage

NODES_PAYLOAD: dict[str, Any] = {
    "items": [
        {
            "metadata": {"name": "node-a"},
            "status": {"allocatable": {"cpu": "4", "memory": "8Gi"}},
        },
        {
            "metadata": {"name": "node-b"},
            "status": {"allocatable": {"cpu": "8", "memory": "16Gi"}},
        },
    ]
}


def _container(request: str, limit: str) -> dict[str, Any]:
    return {
        "name": "app",
        "resources": {"requests": {"cpu": request}, "limits": {"cpu": limit}},
    }


PODS_BY_NODE: dict[str, dict[str, Any]] = {
    "node-a": {
        "items": [
            {
                "metadata": {"name": f"pod-{i}", "namespace": "default"},
                "spec": {"nodeName": "node-a", "containers": [container]},
            }
            for i, container in enumerate(
                [
                    _container("1", "1500m"),
                    _container("500m", "1"),
                    _container("500m", "500m"),
                ]
            )
        ]
    },
    "node-b": {"items": []},
}


async def _fake_kubectl(args: tuple[str, ...]) -> dict[str, Any]:
    if args[:2] == ("get", "nodes"):
        return NODES_PAYLOAD
    if args[:2] == ("get", "pods"):
        selector = args[-1]
        assert selector.startswith("--field-selector=spec.nodeName=")
        return PODS_BY_NODE[selector.split("=", 2)[2]]
    raise AssertionError(f"unexpected kubectl call {args}")


class TestClusterController:
    """Tests for ClusterController class."""

    @pytest.fixture
    def controller(self) -> ClusterController:
        controller = ClusterController("/tmp/kubeconfig")
        controller._run_kubectl_json = AsyncMock(side_effect=_fake_kubectl)
        return controller

    @pytest.mark.asyncio
    async def test_list_nodes(self, controller: ClusterController) -> None:
        nodes = await controller.list_nodes()
        assert [node.name for node in nodes] == ["node-a", "node-b"]
        assert nodes[0].cpu_allocatable == 4000

    @pytest.mark.asyncio
    async def test_list_pods_for_node_uses_field_selector(
        self, controller: ClusterController
    ) -> None:
        pods = await controller.list_pods(node_name="node-a")
        assert len(pods) == 3
        args = controller._run_kubectl_json.call_args.args[0]
        assert "--all-namespaces" in args
        assert args[-1] == "--field-selector=spec.nodeName=node-a"

    @pytest.mark.asyncio
    async def test_list_pods_all_nodes(self) -> None:
        controller = ClusterController("/tmp/kubeconfig")
        controller._run_kubectl_json = AsyncMock(return_value={"items": []})
        await controller.list_pods()
        args = controller._run_kubectl_json.call_args.args[0]
        assert not any(arg.startswith("--field-selector") for arg in args)

    @pytest.mark.asyncio
    async def test_fetch_node_report_end_to_end(self, controller: ClusterController) -> None:
        report = await controller.fetch_node_report()

        node_a, node_b = report
        assert node_a.name == "node-a"
        assert node_a.total_pods == 3
        assert node_a.reserved_cpu == 2000
        assert node_a.committed_cpu == 3000
        assert format_percentage(node_a.reserved_cpu_fraction) == "50.00%"
        assert format_percentage(node_a.committed_cpu_fraction) == "75.00%"
        assert node_b.total_pods == 0
        assert format_percentage(node_b.reserved_cpu_fraction) == "0.00%"
        assert format_percentage(node_b.committed_cpu_fraction) == "0.00%"

    @pytest.mark.asyncio
    async def test_fetch_node_report_progress(self, controller: ClusterController) -> None:
        progress: list[tuple[int, int]] = []
        await controller.fetch_node_report(lambda current, total: progress.append((current, total)))
        assert progress == [(0, 2), (1, 2), (2, 2)]

    @pytest.mark.asyncio
    async def test_node_listing_failure(self) -> None:
        controller = ClusterController("/tmp/kubeconfig")
        controller._run_kubectl_json = AsyncMock(side_effect=KubectlError("Unauthorized"))

        with pytest.raises(UpstreamListingError) as exc_info:
            await controller.fetch_node_report()

        assert exc_info.value.source == ClusterController.SOURCE_NODES
        assert "Unauthorized" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_pod_listing_failure_aborts_report(self) -> None:
        async def fail_on_pods(args: tuple[str, ...]) -> dict[str, Any]:
            if args[1] == "nodes":
                return NODES_PAYLOAD
            raise KubectlError("timeout")

        controller = ClusterController("/tmp/kubeconfig")
        controller._run_kubectl_json = AsyncMock(side_effect=fail_on_pods)

        with pytest.raises(UpstreamListingError) as exc_info:
            await controller.fetch_node_report()

        assert exc_info.value.source == ClusterController.SOURCE_PODS

    @pytest.mark.asyncio
    async def test_get_pod_node(self) -> None:
        controller = ClusterController("/tmp/kubeconfig")
        controller._run_kubectl_json = AsyncMock(
            return_value={
                "metadata": {"name": "web-0", "namespace": "shop"},
                "spec": {"nodeName": "node-b", "containers": []},
            }
        )

        assert await controller.get_pod_node("shop", "web-0") == "node-b"
        args = controller._run_kubectl_json.call_args.args[0]
        assert args[:3] == ("get", "pod", "web-0")
        assert "shop" in args

    @pytest.mark.asyncio
    async def test_get_pod_node_unscheduled(self) -> None:
        controller = ClusterController("/tmp/kubeconfig")
        controller._run_kubectl_json = AsyncMock(
            return_value={"metadata": {"name": "p", "namespace": "ns"}, "spec": {}}
        )
        assert await controller.get_pod_node("ns", "p") == ""

    @pytest.mark.asyncio
    async def test_get_pod_failure_raises_resolution_error(self) -> None:
        controller = ClusterController("/tmp/kubeconfig")
        controller._run_kubectl_json = AsyncMock(side_effect=KubectlError("NotFound"))

        with pytest.raises(ResolutionError) as exc_info:
            await controller.get_pod_node("ns", "gone")

        assert exc_info.value.name == "gone"
