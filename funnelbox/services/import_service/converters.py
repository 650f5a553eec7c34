"""Row to Booking conversion for CRM report imports."""

import logging

from funnelbox.models.booking import Booking, BookingStatus
from funnelbox.models.import_result import ReportType

from .errors import RowSkipped
from .mapping import ColumnMap
from .parsers import parse_cents, parse_date
from .resolver import EntityKind, EntityResolver

logger = logging.getLogger(__name__)

# Placeholder HoneyBook writes into an empty open-text answer
EMPTY_OPEN_TEXT = '""'


class DuplicateRow(RowSkipped):
    """Another participant row of a project that was already imported."""


def revenue_cents(row: dict[str, str], column_map: ColumnMap) -> int:
    """Parsed amount in cents; 0 when the column is missing or unparseable."""
    return parse_cents(column_map.cell(row, "total_amount")) or 0


def lead_source_name(row: dict[str, str], column_map: ColumnMap, row_warnings: list[str] | None = None) -> str:
    """Build the lead source name for a row.

    The lead source and its open-text answer are joined as
    ``"Vendor Referral - Veronica"`` when both are present.
    """
    name = column_map.cell(row, "lead_source")
    open_text = column_map.cell(row, "lead_source_open_text")
    if open_text == EMPTY_OPEN_TEXT:
        open_text = ""

    if name and open_text:
        return f"{name} - {open_text}"
    if open_text and row_warnings is not None:
        row_warnings.append(f"Lead source detail '{open_text}' has no lead source, using default")
    return name


def row_to_booking(
    row: dict[str, str],
    column_map: ColumnMap,
    resolver: EntityResolver,
    booking_id: str,
    report_type: ReportType = ReportType.LEADS,
    owner_id: str | None = None,
    seen_projects: set[str] | None = None,
    row_warnings: list[str] | None = None,
) -> Booking:
    """Convert one report row to a Booking.

    Args:
        row: Raw row dict from the report.
        column_map: Inferred columns for the report.
        resolver: Entity resolver for this import.
        booking_id: Id to give the booking.
        report_type: Layout of the report the row came from.
        owner_id: Passed through onto the booking.
        seen_projects: Project keys already imported; Booked Client rows
            whose key is present raise DuplicateRow and new keys are added.
        row_warnings: Receives non-fatal notes about the row.

    Returns:
        Booking built from the row.

    Raises:
        RowSkipped: The row lacks a project name or its required date.
    """
    project_name = column_map.cell(row, "project_name")
    if not project_name:
        raise RowSkipped("Skipping row with no project name")

    date_inquired = parse_date(column_map.cell(row, "date_inquired"))
    date_booked = parse_date(column_map.cell(row, "date_booked"))
    project_date = parse_date(column_map.cell(row, "project_date"))

    if report_type is ReportType.BOOKED_CLIENTS:
        # One row per person on the project; keep the first
        if seen_projects is not None:
            key = f"{project_name.lower()}-{date_booked or date_inquired or 'unknown'}"
            if key in seen_projects:
                raise DuplicateRow(f'Duplicate row for "{project_name}"')
            seen_projects.add(key)
        if date_booked is None:
            raise RowSkipped(f'Missing booked date for "{project_name}", skipping')
    elif date_inquired is None:
        raise RowSkipped("Missing inquiry date, skipping")

    service_type_id = resolver.resolve(EntityKind.SERVICE_TYPE, column_map.cell(row, "service_type"))
    lead_source_id = resolver.resolve(
        EntityKind.LEAD_SOURCE, lead_source_name(row, column_map, row_warnings)
    )

    return Booking(
        id=booking_id,
        project_name=project_name,
        client_name=column_map.cell(row, "client_name") or project_name,
        client_email=column_map.cell(row, "client_email") or None,
        client_phone=column_map.cell(row, "client_phone") or None,
        service_type_id=service_type_id,
        lead_source_id=lead_source_id,
        status=BookingStatus.BOOKED if date_booked else BookingStatus.INQUIRY,
        date_inquired=date_inquired,
        date_booked=date_booked,
        project_date=project_date,
        booked_revenue=revenue_cents(row, column_map),
        notes=column_map.cell(row, "notes") or None,
        owner_id=owner_id,
    )
