"""Configuration management for episodeguide."""

from episodeguide.config.manager import ConfigManager
from episodeguide.config.schema import DEFAULT_SHOW_ID, TVMAZE_API_URL, GlobalConfig

__all__ = ["ConfigManager", "GlobalConfig", "DEFAULT_SHOW_ID", "TVMAZE_API_URL"]
