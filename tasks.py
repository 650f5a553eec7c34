"""Invoke tasks for FunnelBox development."""

from invoke import task
from invoke.context import Context


@task
def start(ctx: Context, host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Start the FunnelBox import API.

    Args:
        ctx: Invoke context
        host: Host to bind to (default: server.host from config)
        port: Port to bind to (default: server.port from config)
        reload: Enable auto-reload for development
    """
    cmd = "uv run funnelbox-server"
    if host:
        cmd += f" --host {host}"
    if port:
        cmd += f" --port {port}"
    if reload:
        cmd += " --reload"
    ctx.run(cmd, pty=True)


@task
def test(ctx: Context, verbose: bool = False, coverage: bool = False) -> None:
    """Run the test suite.

    Args:
        ctx: Invoke context
        verbose: Enable verbose output
        coverage: Run with coverage report
    """
    cmd = "uv run pytest"
    if verbose:
        cmd += " -v"
    if coverage:
        cmd += " --cov=funnelbox --cov-report=term-missing"
    ctx.run(cmd, pty=True)


@task(name="import-file")
def import_file(ctx: Context, path: str, report_type: str = "auto", json: bool = False) -> None:
    """Import a report file and print the result.

    Args:
        ctx: Invoke context
        path: CSV or XLSX report export
        report_type: leads, booked-clients or auto
        json: Print the full result as JSON
    """
    cmd = f"uv run funnelbox-import run {path} --report-type {report_type}"
    if json:
        cmd += " --json"
    ctx.run(cmd, pty=True)


@task
def clean(ctx: Context) -> None:
    """Clean up caches and build artifacts."""
    for pattern in ["__pycache__", "*.pyc", "*.pyo", ".pytest_cache"]:
        ctx.run(f"find . -name '{pattern}' -exec rm -rf {{}} + 2>/dev/null || true", warn=True)

    for path in ["build", "dist", "*.egg-info", ".eggs"]:
        ctx.run(f"rm -rf {path} 2>/dev/null || true", warn=True)

    print("Cleanup complete")
