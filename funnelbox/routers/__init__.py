"""API routers for FunnelBox."""
