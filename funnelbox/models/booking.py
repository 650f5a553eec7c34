"""Booking record produced by CRM report imports."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BookingStatus(str, Enum):
    """Sales status of an imported project."""

    INQUIRY = "inquiry"
    BOOKED = "booked"


class Booking(BaseModel):
    """A project imported from a CRM report.

    Revenue is held as an integer number of cents so monthly and
    year-to-date sums never pick up float rounding error.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    project_name: str
    client_name: str
    client_email: str | None = None
    client_phone: str | None = None
    service_type_id: str
    lead_source_id: str
    status: BookingStatus = BookingStatus.INQUIRY
    date_inquired: date | None = None
    date_booked: date | None = None
    project_date: date | None = None
    booked_revenue: int = Field(0, description="Revenue in cents")
    notes: str | None = None
    owner_id: str | None = None
