"""Command-line tools for FunnelBox."""
