"""Configuration manager for loading episodeguide config."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from episodeguide.config.schema import GlobalConfig
from episodeguide.utils.errors import InvalidConfigError
from episodeguide.utils.paths import get_config_dir, get_config_file

logger = logging.getLogger(__name__)

ENV_API_URL = "EPISODEGUIDE_API_URL"
ENV_DEFAULT_SHOW = "EPISODEGUIDE_DEFAULT_SHOW"


class ConfigManager:
    """Reads episodeguide configuration.

    The config file is optional and never written: a missing file means
    defaults. Environment variables override file values.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        if config_dir is None:
            self.config_dir = get_config_dir()
            self.config_file = get_config_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If the config file or an override is invalid
        """
        data: dict = {}
        if self.config_file.exists():
            try:
                with open(self.config_file) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise InvalidConfigError(
                    f"Could not read configuration in {self.config_file}: {e}"
                ) from e
            if not isinstance(data, dict):
                raise InvalidConfigError(
                    f"Invalid configuration in {self.config_file}: expected a mapping"
                )
            logger.debug(f"Loaded configuration from {self.config_file}")

        data.update(self._env_overrides())

        try:
            return GlobalConfig(**data)
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid configuration: {e}") from e

    def _env_overrides(self) -> dict[str, str]:
        overrides = {}
        if api_url := os.environ.get(ENV_API_URL):
            overrides["api_base_url"] = api_url
        if default_show := os.environ.get(ENV_DEFAULT_SHOW):
            overrides["default_show_id"] = default_show
        return overrides
