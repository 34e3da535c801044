"""Base controller with kubectl plumbing shared by the data controllers.

Controllers run ``kubectl`` as a subprocess with JSON output. The blocking call
is pushed to a worker thread with ``asyncio.to_thread`` so the Textual event
loop stays responsive while the cluster answers.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import subprocess
from typing import Any

from kubehoggers.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubehoggers.constants.values import KUBECONFIG_ENV_VAR

logger = logging.getLogger(__name__)


class KubectlError(RuntimeError):
    """Raised when a kubectl invocation fails or returns unusable output."""


class BaseController:
    """Base controller class running kubectl against one kubeconfig.

    Args:
        kubeconfig: Kubeconfig path (or ``os.pathsep`` separated list) exported
            to kubectl as ``$KUBECONFIG``.
        request_timeout: Value for kubectl's ``--request-timeout``.
        command_timeout: Process timeout in seconds.
    """

    def __init__(
        self,
        kubeconfig: str,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
        command_timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> None:
        self.kubeconfig = kubeconfig
        self.request_timeout = request_timeout
        self.command_timeout = command_timeout

    def _build_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = ["kubectl", *args]
        if self.request_timeout:
            cmd.append(f"--request-timeout={self.request_timeout}")
        return cmd

    def _run_kubectl_sync(self, args: tuple[str, ...]) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._build_command(args)
        env = {**os.environ, KUBECONFIG_ENV_VAR: self.kubeconfig}
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.command_timeout,
                env=env,
            )
        except subprocess.TimeoutExpired as e:
            raise KubectlError(
                f"kubectl timed out after {self.command_timeout}s"
            ) from e
        except OSError as e:
            raise KubectlError(f"Cannot run kubectl: {e}") from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise KubectlError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    async def _run_kubectl_json(self, args: tuple[str, ...]) -> dict[str, Any]:
        """Run kubectl and decode its output as a JSON object."""
        output = await self._run_kubectl(args)
        try:
            payload = json.loads(output)
        except json.JSONDecodeError as e:
            raise KubectlError(f"kubectl returned invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise KubectlError("kubectl returned an unexpected JSON document")
        return payload
