"""Application state and settings models."""

from kubehoggers.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    CredentialsNotFoundError,
)
from kubehoggers.models.state.config_manager import ConfigManager

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "CredentialsNotFoundError",
]
