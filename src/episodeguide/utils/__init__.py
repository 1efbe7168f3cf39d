"""Utility functions and helpers for episodeguide."""

from episodeguide.utils.errors import (
    CatalogStatusError,
    CatalogTransportError,
    ConfigError,
    EpisodeGuideError,
    InvalidConfigError,
    NetworkError,
)
from episodeguide.utils.paths import (
    get_config_dir,
    get_config_file,
    get_log_dir,
    get_log_file,
)

__all__ = [
    # Errors
    "EpisodeGuideError",
    "ConfigError",
    "InvalidConfigError",
    "NetworkError",
    "CatalogStatusError",
    "CatalogTransportError",
    # Paths
    "get_config_dir",
    "get_config_file",
    "get_log_dir",
    "get_log_file",
]
