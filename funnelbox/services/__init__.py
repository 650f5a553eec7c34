"""Services for FunnelBox."""
