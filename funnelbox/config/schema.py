"""Pydantic models for FunnelBox configuration.

These models define the structure of the config.toml file.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    max_upload_mb: int = 10

    @property
    def max_upload_bytes(self) -> int:
        """Get max upload size in bytes."""
        return self.max_upload_mb * 1024 * 1024


class ImportConfig(BaseModel):
    """CRM report import configuration."""

    # Row limit applied by the HTTP and CLI layers before the pipeline runs
    max_rows: int = 5000
    default_report_type: Literal["leads", "booked-clients", "auto"] = "leads"
    source_label: str = "HoneyBook"
    default_service_type: str = "General Service"
    default_lead_source: str = "Direct"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class FunnelboxConfig(BaseModel):
    """Main FunnelBox configuration loaded from config.toml."""

    app_name: str = "FunnelBox"
    server: ServerConfig = Field(default_factory=ServerConfig)
    imports: ImportConfig = Field(default_factory=ImportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
