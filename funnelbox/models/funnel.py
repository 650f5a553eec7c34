"""Monthly sales-funnel statistics."""

from pydantic import BaseModel, ConfigDict, Field


class FunnelData(BaseModel):
    """Funnel counts for one calendar month.

    ``inquiries_ytd`` and ``bookings_ytd`` accumulate from the first month
    of the same year and restart in January of the next year.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    year: int
    month: int = Field(..., ge=1, le=12)
    inquiries: int = 0
    closes: int = 0
    bookings: int = Field(0, description="Booked revenue in cents")
    inquiries_ytd: int = 0
    bookings_ytd: int = Field(0, description="Year-to-date booked revenue in cents")
    notes: str | None = None
