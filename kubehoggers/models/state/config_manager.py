"""Settings loading from an optional YAML file plus CLI overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubehoggers.constants.values import CONFIG_FILE_ENV_VAR
from kubehoggers.models.state.app_settings import AppSettings, ConfigLoadError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Builds AppSettings from a settings file and command line values."""

    @staticmethod
    def default_path() -> Path | None:
        """Settings file named by the environment, if any."""
        raw_value = os.environ.get(CONFIG_FILE_ENV_VAR, "").strip()
        if not raw_value:
            return None
        return Path(raw_value).expanduser()

    @staticmethod
    def read_file(path: Path) -> dict[str, Any]:
        """Read a YAML settings mapping.

        Raises:
            ConfigLoadError: If the file cannot be read or is not a mapping.
        """
        try:
            with path.open(encoding="utf-8") as handle:
                content = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read settings file {path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigLoadError(f"Settings file {path} must contain a mapping")
        return content

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        *,
        defaults: dict[str, Any] | None = None,
        **overrides: Any,
    ) -> AppSettings:
        """Load settings, letting non-None overrides win over file values.

        Args:
            path: Optional YAML settings file. Falls back to the file named by
                ``$KUBEHOGGERS_CONFIG``.
            defaults: Values used when neither the file nor an override sets them.
            **overrides: Values from the command line.

        Raises:
            ConfigLoadError: If the file is unreadable or values are invalid.
        """
        settings_path = path or cls.default_path()
        data: dict[str, Any] = dict(defaults or {})
        if settings_path is not None:
            data.update(cls.read_file(settings_path))
            logger.debug("Loaded settings from %s", settings_path)

        data.update({key: value for key, value in overrides.items() if value is not None})

        try:
            return AppSettings(**data)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings: {e}") from e
