"""FunnelBox configuration module.

This module provides TOML-based configuration with environment variable overrides.

Configuration is loaded from the following locations (in order of priority):
1. Environment variables (highest priority, FUNNELBOX_* prefix)
2. ./config.toml (project root - for development)
3. ~/.config/funnelbox/config.toml (user config)
4. /etc/funnelbox/config.toml (system config)
"""

from funnelbox.config.schema import (
    FunnelboxConfig,
    ImportConfig,
    LoggingConfig,
    ServerConfig,
)
from funnelbox.config.settings import get_settings, reset_settings, settings

__all__ = [
    "FunnelboxConfig",
    "ImportConfig",
    "LoggingConfig",
    "ServerConfig",
    "get_settings",
    "reset_settings",
    "settings",
]
