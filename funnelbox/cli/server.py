"""FunnelBox API server.

Usage:
    funnelbox-server [--host HOST] [--port PORT] [--reload]

Host, port and reload default to the [server] section of the config file
(FUNNELBOX_HOST, FUNNELBOX_PORT and FUNNELBOX_DEBUG override it).
"""

import argparse
import sys

import uvicorn

from funnelbox.config import settings
from funnelbox.logging_config import configure_logging


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run the FunnelBox import API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                        Start on the configured host and port
  %(prog)s --port 8080            Start on port 8080
  %(prog)s --reload               Start with auto-reload (development)
        """,
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port})",
    )
    parser.add_argument(
        "--reload", "-r",
        action="store_true",
        help="Enable auto-reload (on by default when debug is set)",
    )

    args = parser.parse_args(argv)
    configure_logging()

    uvicorn.run(
        "funnelbox.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload or settings.debug,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
