"""Configuration loader for FunnelBox.

Loads configuration from TOML files. Environment variables can override
any configuration value.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from funnelbox.config.schema import FunnelboxConfig

logger = logging.getLogger(__name__)

# Env var -> (section, key); a section of None means a top-level key
ENV_MAPPINGS: dict[str, tuple[str | None, str]] = {
    "APP_NAME": (None, "app_name"),
    # Server
    "SERVER_HOST": ("server", "host"),
    "SERVER_PORT": ("server", "port"),
    "SERVER_DEBUG": ("server", "debug"),
    "SERVER_MAX_UPLOAD_MB": ("server", "max_upload_mb"),
    "HOST": ("server", "host"),  # Shorthand
    "PORT": ("server", "port"),  # Shorthand
    "DEBUG": ("server", "debug"),  # Shorthand
    # Imports
    "IMPORT_MAX_ROWS": ("imports", "max_rows"),
    "IMPORT_DEFAULT_REPORT_TYPE": ("imports", "default_report_type"),
    "IMPORT_SOURCE_LABEL": ("imports", "source_label"),
    "IMPORT_DEFAULT_SERVICE_TYPE": ("imports", "default_service_type"),
    "IMPORT_DEFAULT_LEAD_SOURCE": ("imports", "default_lead_source"),
    # Logging
    "LOG_LEVEL": ("logging", "level"),
}

INT_KEYS = {"port", "max_upload_mb", "max_rows"}
BOOL_KEYS = {"debug"}


def get_config_search_paths() -> list[Path]:
    """Get the list of paths to search for configuration files.

    Returns paths in priority order (first found wins):
    1. ./config.toml (project root - for development)
    2. ~/.config/funnelbox/config.toml (user config)
    3. /etc/funnelbox/config.toml (system config)
    """
    return [
        Path.cwd() / "config.toml",
        Path.home() / ".config" / "funnelbox" / "config.toml",
        Path("/etc/funnelbox/config.toml"),
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file from search paths."""
    for path in get_config_search_paths():
        if path.exists() and path.is_file():
            logger.debug("Found config file: %s", path)
            return path
    return None


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def apply_env_overrides(config_dict: dict[str, Any], prefix: str = "FUNNELBOX") -> None:
    """Apply environment variable overrides to configuration dictionary.

    Environment variables are mapped as follows:
    - FUNNELBOX_SERVER_PORT -> config_dict["server"]["port"]
    - FUNNELBOX_IMPORT_MAX_ROWS -> config_dict["imports"]["max_rows"]
    - etc.

    Note: This modifies config_dict in place.
    """
    for suffix, (section, key) in ENV_MAPPINGS.items():
        value = os.environ.get(f"{prefix}_{suffix}")
        if value is None:
            continue

        if key in INT_KEYS:
            converted: Any = int(value)
        elif key in BOOL_KEYS:
            converted = value.lower() in ("true", "1", "yes")
        else:
            converted = value

        if section is None:
            config_dict[key] = converted
        else:
            config_dict.setdefault(section, {})[key] = converted


def load_config(config_file: Path | None = None) -> FunnelboxConfig:
    """Load configuration from TOML file with environment variable overrides.

    Args:
        config_file: Optional path to config file. If not provided,
                     searches default locations.

    Returns:
        FunnelboxConfig instance with all settings loaded.
    """
    config_dict: dict[str, Any] = {}

    if config_file is None:
        config_file = find_config_file()

    if config_file and config_file.exists():
        logger.info("Loading config from: %s", config_file)
        config_dict = load_toml_file(config_file)
    else:
        logger.info("No config file found, using defaults with env overrides")

    apply_env_overrides(config_dict)

    return FunnelboxConfig(**config_dict)
