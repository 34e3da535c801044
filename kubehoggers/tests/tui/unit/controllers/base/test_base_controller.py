"""Tests for base controller kubectl plumbing."""

from __future__ import annotations

import subprocess
from unittest.mock import AsyncMock, patch

import pytest

from kubehoggers.constants.values import KUBECONFIG_ENV_VAR
from kubehoggers.controllers.base.base_controller import BaseController, KubectlError

RUN_PATH = "kubehoggers.controllers.base.base_controller.subprocess.run"


@pytest.fixture
def controller() -> BaseController:
    return BaseController("/tmp/kubeconfig", request_timeout="10s", command_timeout=5)


class TestBuildCommand:
    """Tests for BaseController._build_command."""

    def test_appends_request_timeout(self, controller: BaseController) -> None:
        assert controller._build_command(("get", "nodes")) == [
            "kubectl",
            "get",
            "nodes",
            "--request-timeout=10s",
        ]

    def test_empty_request_timeout_omitted(self) -> None:
        controller = BaseController("/tmp/kubeconfig", request_timeout="")
        assert controller._build_command(("get", "nodes")) == ["kubectl", "get", "nodes"]


class TestRunKubectlSync:
    """Tests for BaseController._run_kubectl_sync."""

    def test_exports_kubeconfig(self, controller: BaseController) -> None:
        completed = subprocess.CompletedProcess([], 0, stdout="{}", stderr="")
        with patch(RUN_PATH, return_value=completed) as run:
            assert controller._run_kubectl_sync(("get", "nodes")) == "{}"

        kwargs = run.call_args.kwargs
        assert kwargs["env"][KUBECONFIG_ENV_VAR] == "/tmp/kubeconfig"
        assert kwargs["timeout"] == 5

    def test_nonzero_exit_raises_with_stderr(self, controller: BaseController) -> None:
        completed = subprocess.CompletedProcess([], 1, stdout="", stderr="forbidden\n")
        with patch(RUN_PATH, return_value=completed):
            with pytest.raises(KubectlError, match="forbidden"):
                controller._run_kubectl_sync(("get", "nodes"))

    def test_timeout_wrapped(self, controller: BaseController) -> None:
        with patch(RUN_PATH, side_effect=subprocess.TimeoutExpired("kubectl", 5)):
            with pytest.raises(KubectlError, match="timed out"):
                controller._run_kubectl_sync(("get", "nodes"))

    def test_missing_binary_wrapped(self, controller: BaseController) -> None:
        with patch(RUN_PATH, side_effect=FileNotFoundError("kubectl")):
            with pytest.raises(KubectlError, match="Cannot run kubectl"):
                controller._run_kubectl_sync(("get", "nodes"))


class TestRunKubectlJson:
    """Tests for BaseController._run_kubectl_json."""

    @pytest.mark.asyncio
    async def test_decodes_object(self, controller: BaseController) -> None:
        controller._run_kubectl = AsyncMock(return_value='{"items": []}')
        assert await controller._run_kubectl_json(("get", "nodes")) == {"items": []}

    @pytest.mark.asyncio
    async def test_invalid_json(self, controller: BaseController) -> None:
        controller._run_kubectl = AsyncMock(return_value="not json")
        with pytest.raises(KubectlError, match="invalid JSON"):
            await controller._run_kubectl_json(("get", "nodes"))

    @pytest.mark.asyncio
    async def test_non_object_json(self, controller: BaseController) -> None:
        controller._run_kubectl = AsyncMock(return_value="[]")
        with pytest.raises(KubectlError, match="unexpected"):
            await controller._run_kubectl_json(("get", "nodes"))

    @pytest.mark.asyncio
    async def test_runs_in_thread(self, controller: BaseController) -> None:
        completed = subprocess.CompletedProcess([], 0, stdout='{"kind": "List"}', stderr="")
        with patch(RUN_PATH, return_value=completed):
            assert await controller._run_kubectl_json(("get", "pods")) == {"kind": "List"}
