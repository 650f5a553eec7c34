"""FunnelBox - CRM export importer for bookings and sales-funnel statistics."""

__version__ = "0.3.0"
