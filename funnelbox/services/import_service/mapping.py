"""Column inference for CRM report imports."""

import logging

from pydantic import BaseModel, ConfigDict

from funnelbox.models.import_result import ReportType

from .constants import BOOKED_CLIENT_MARKERS, REPORT_ALIASES

logger = logging.getLogger(__name__)


class ColumnMap(BaseModel):
    """Source header for each canonical field, or None when the report lacks it."""

    model_config = ConfigDict(frozen=True)

    project_name: str | None = None
    client_name: str | None = None
    client_email: str | None = None
    client_phone: str | None = None
    service_type: str | None = None
    lead_source: str | None = None
    lead_source_open_text: str | None = None
    date_booked: str | None = None
    project_date: str | None = None
    date_inquired: str | None = None
    total_amount: str | None = None
    status: str | None = None
    notes: str | None = None

    def cell(self, row: dict[str, str], field: str) -> str:
        """Return the stripped cell for a canonical field, or "" if unmapped."""
        header = getattr(self, field)
        if header is None:
            return ""
        return (row.get(header) or "").strip()


def find_column(headers: list[str], aliases: list[str]) -> str | None:
    """Find the header that best matches a list of aliases.

    Aliases are tried in order. For each alias an exact case-insensitive
    match wins; otherwise the first header containing the alias is used.

    Args:
        headers: Column header names from the report.
        aliases: Accepted names for one canonical field, most specific first.

    Returns:
        The matching header as it appears in ``headers``, or None.
    """
    lowered = [h.lower().strip() for h in headers]

    for alias in aliases:
        term = alias.lower().strip()
        if term in lowered:
            return headers[lowered.index(term)]
        for header, low in zip(headers, lowered):
            if term in low:
                return header

    return None


def infer_column_map(headers: list[str], report_type: ReportType = ReportType.LEADS) -> ColumnMap:
    """Resolve every canonical field of a report type to a source header.

    Fields are resolved independently; unmatched fields stay None.
    """
    aliases = REPORT_ALIASES[report_type]
    column_map = ColumnMap(**{field: find_column(headers, names) for field, names in aliases.items()})
    logger.debug("%s column mapping: %s", report_type.value, column_map.model_dump(exclude_none=True))
    return column_map


def detect_report_type(headers: list[str]) -> ReportType:
    """Guess which HoneyBook report a header row belongs to."""
    lowered = {h.lower().strip() for h in headers}
    if any(marker in lowered for marker in BOOKED_CLIENT_MARKERS):
        return ReportType.BOOKED_CLIENTS
    return ReportType.LEADS
