"""Global settings instance for FunnelBox.

The settings object wraps the structured FunnelboxConfig and exposes a flat
property interface to the rest of the application.
"""

import logging

from funnelbox.config.loader import load_config
from funnelbox.config.schema import FunnelboxConfig

logger = logging.getLogger(__name__)


class Settings:
    """Flat accessor over the loaded FunnelboxConfig."""

    def __init__(self, config: FunnelboxConfig | None = None):
        """Initialize settings.

        Args:
            config: Optional FunnelboxConfig instance. If not provided, loads from file.
        """
        self._config = config or load_config()

    @property
    def config(self) -> FunnelboxConfig:
        """Get the full configuration object."""
        return self._config

    # Application
    @property
    def app_name(self) -> str:
        return self._config.app_name

    @property
    def debug(self) -> bool:
        return self._config.server.debug

    # Server
    @property
    def host(self) -> str:
        return self._config.server.host

    @property
    def port(self) -> int:
        return self._config.server.port

    @property
    def max_upload_size_mb(self) -> int:
        return self._config.server.max_upload_mb

    @property
    def max_upload_size_bytes(self) -> int:
        return self._config.server.max_upload_bytes

    # Imports
    @property
    def max_import_rows(self) -> int:
        return self._config.imports.max_rows

    @property
    def default_report_type(self) -> str:
        return self._config.imports.default_report_type

    @property
    def import_source_label(self) -> str:
        return self._config.imports.source_label

    @property
    def default_service_type(self) -> str:
        return self._config.imports.default_service_type

    @property
    def default_lead_source(self) -> str:
        return self._config.imports.default_lead_source

    # Logging
    @property
    def log_level(self) -> str:
        return self._config.logging.level

    @property
    def log_format(self) -> str:
        return self._config.logging.format


# Global settings instance - lazily initialized
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    The settings are loaded once and cached for subsequent calls.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance.

    This is primarily useful for testing to reload configuration.
    """
    global _settings
    _settings = None


class _SettingsProxy:
    """Proxy object that lazily loads settings on first access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return repr(get_settings())


settings = _SettingsProxy()
