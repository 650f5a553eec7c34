"""Result of importing one CRM report."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from funnelbox.models.booking import Booking
from funnelbox.models.catalog import LeadSource, ServiceType
from funnelbox.models.funnel import FunnelData


class ReportType(str, Enum):
    """CRM report layouts the importer understands."""

    LEADS = "leads"
    BOOKED_CLIENTS = "booked-clients"


class ImportResult(BaseModel):
    """Everything one import produced.

    ``service_types`` and ``lead_sources`` are the caller's catalogs with any
    newly created entities appended. ``errors`` and ``warnings`` are row
    diagnostics of the form ``"Row N: ..."``.
    """

    model_config = ConfigDict(frozen=True)

    report_type: ReportType
    rows_read: int = 0
    bookings: tuple[Booking, ...] = ()
    funnel_data: tuple[FunnelData, ...] = ()
    service_types: tuple[ServiceType, ...] = ()
    lead_sources: tuple[LeadSource, ...] = ()
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
