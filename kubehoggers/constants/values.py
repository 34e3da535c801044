"""Scalar constants.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "kubehoggers"
APP_TITLE: Final = "Kube Hoggers"
APP_DESCRIPTION: Final = (
    "Shed a light on the most resource intensive applications in a Kubernetes cluster"
)

# ============================================================================
# Environment
# ============================================================================

KUBECONFIG_ENV_VAR: Final = "KUBECONFIG"
CONFIG_FILE_ENV_VAR: Final = "KUBEHOGGERS_CONFIG"

# ============================================================================
# Unit conversion
# ============================================================================

BYTES_PER_MEBIBYTE: Final = 1024 * 1024

# ============================================================================
# Rendering sentinels
# ============================================================================

INFINITE_PERCENTAGE: Final = "∞%"
UNDEFINED_PERCENTAGE: Final = "NaN%"

# ============================================================================
# Metrics API
# ============================================================================

POD_METRICS_API_PATH: Final = "/apis/metrics.k8s.io/v1beta1/pods"
METRICS_SERVER_HINT: Final = (
    "Failed to get data from the metrics-server.\n"
    "Are you sure there is one on the current cluster?"
)

__all__ = [
    "APP_DESCRIPTION",
    "APP_NAME",
    "APP_TITLE",
    "BYTES_PER_MEBIBYTE",
    "CONFIG_FILE_ENV_VAR",
    "INFINITE_PERCENTAGE",
    "KUBECONFIG_ENV_VAR",
    "METRICS_SERVER_HINT",
    "POD_METRICS_API_PATH",
    "UNDEFINED_PERCENTAGE",
]
