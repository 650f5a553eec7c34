"""Pydantic schemas for CRM report import endpoints."""

from enum import Enum

from pydantic import BaseModel, Field

from funnelbox.models import (
    Booking,
    FunnelData,
    ImportResult,
    LeadSource,
    ReportType,
    ServiceType,
)


class ReportTypeParam(str, Enum):
    """Report type accepted in the import URL."""

    LEADS = "leads"
    BOOKED_CLIENTS = "booked-clients"
    AUTO = "auto"

    def to_report_type(self) -> ReportType | None:
        """Map to a ReportType; AUTO becomes None (detect from headers)."""
        if self is ReportTypeParam.AUTO:
            return None
        return ReportType(self.value)


class ImportRequest(BaseModel):
    """CSV text plus the caller's current catalogs."""

    csv_text: str = Field(..., description="Raw CSV export text")
    existing_service_types: list[ServiceType] = Field(default_factory=list)
    existing_lead_sources: list[LeadSource] = Field(default_factory=list)
    owner_id: str | None = Field(None, description="Opaque owner id copied onto bookings")
    generate_bookings: bool | None = Field(
        None,
        description="Keep booking records (default: only for the Booked Client report)",
    )


class ImportResultResponse(BaseModel):
    """Response after importing a report."""

    report_type: ReportType
    rows_read: int
    bookings: list[Booking]
    funnel_data: list[FunnelData]
    service_types: list[ServiceType]
    lead_sources: list[LeadSource]
    errors: list[str]
    warnings: list[str]

    @classmethod
    def from_result(cls, result: ImportResult) -> "ImportResultResponse":
        return cls(
            report_type=result.report_type,
            rows_read=result.rows_read,
            bookings=list(result.bookings),
            funnel_data=list(result.funnel_data),
            service_types=list(result.service_types),
            lead_sources=list(result.lead_sources),
            errors=list(result.errors),
            warnings=list(result.warnings),
        )
