"""Root logger setup for the command-line tools."""

import logging

from funnelbox.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger from settings.

    Adds a stream handler only when none is installed yet, so handlers set
    up by uvicorn or pytest are left alone.

    Args:
        level: Optional level name overriding the configured one.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=settings.log_format)
    root.setLevel((level or settings.log_level).upper())
