"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from kubehoggers.constants.defaults import (
    ABORT_ON_CYCLE_ERROR_DEFAULT,
    ROWS_LIMIT_DEFAULT,
    TOP_REFRESH_INTERVAL_DEFAULT,
)
from kubehoggers.constants.limits import REFRESH_INTERVAL_MIN, ROWS_LIMIT_MIN
from kubehoggers.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubehoggers.constants.values import KUBECONFIG_ENV_VAR


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Cluster access
    kubeconfig: str = ""
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT

    # Live view
    refresh_interval: int = Field(
        default=TOP_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )  # seconds
    rows_limit: int = Field(default=ROWS_LIMIT_DEFAULT, ge=ROWS_LIMIT_MIN)

    # Abort the process on a failed refresh cycle instead of waiting for the next
    abort_on_cycle_error: bool = ABORT_ON_CYCLE_ERROR_DEFAULT

    def require_kubeconfig(self) -> str:
        """Return the kubeconfig path or raise when none was configured."""
        if not self.kubeconfig:
            raise CredentialsNotFoundError(
                f"${KUBECONFIG_ENV_VAR} environment variable is not set "
                "and no --kubeconfig was given. Aborting"
            )
        return self.kubeconfig


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class CredentialsNotFoundError(ConfigError):
    """Raised when no kubeconfig path could be resolved."""
