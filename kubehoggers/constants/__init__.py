"""Constants module.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from kubehoggers.constants.defaults import (
    ABORT_ON_CYCLE_ERROR_DEFAULT,
    ROWS_LIMIT_DEFAULT,
    STATUS_REFRESH_INTERVAL_DEFAULT,
    TOP_REFRESH_INTERVAL_DEFAULT,
)
from kubehoggers.constants.enums import RefreshPhase, ViewMode
from kubehoggers.constants.limits import REFRESH_INTERVAL_MIN, ROWS_LIMIT_MIN
from kubehoggers.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubehoggers.constants.values import (
    APP_DESCRIPTION,
    APP_NAME,
    APP_TITLE,
    BYTES_PER_MEBIBYTE,
    KUBECONFIG_ENV_VAR,
)

__all__ = [
    # Defaults
    "ABORT_ON_CYCLE_ERROR_DEFAULT",
    # Application
    "APP_DESCRIPTION",
    "APP_NAME",
    "APP_TITLE",
    "BYTES_PER_MEBIBYTE",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECONFIG_ENV_VAR",
    "KUBECTL_COMMAND_TIMEOUT",
    # Limits
    "REFRESH_INTERVAL_MIN",
    "ROWS_LIMIT_DEFAULT",
    "ROWS_LIMIT_MIN",
    "STATUS_REFRESH_INTERVAL_DEFAULT",
    "TOP_REFRESH_INTERVAL_DEFAULT",
    # Enums
    "RefreshPhase",
    "ViewMode",
]
