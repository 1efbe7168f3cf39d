"""Platform-specific paths for episodeguide configuration and logs."""

from pathlib import Path

import platformdirs

APP_NAME = "episodeguide"


def get_config_dir() -> Path:
    """Get the configuration directory (XDG config dir on Linux)."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Get the path to config.yaml."""
    return get_config_dir() / "config.yaml"


def get_log_dir() -> Path:
    """Get the log directory."""
    return Path(platformdirs.user_log_dir(APP_NAME))


def get_log_file() -> Path:
    """Get the default log file path."""
    return get_log_dir() / "episodeguide.log"
