"""Data models for FunnelBox imports."""

from funnelbox.models.booking import Booking, BookingStatus
from funnelbox.models.catalog import LeadSource, ServiceType
from funnelbox.models.funnel import FunnelData
from funnelbox.models.import_result import ImportResult, ReportType

__all__ = [
    # Entities
    "Booking",
    "BookingStatus",
    "LeadSource",
    "ServiceType",
    # Funnel
    "FunnelData",
    # Import
    "ImportResult",
    "ReportType",
]
