"""Batch processing for CRM report imports."""

import logging
from collections.abc import Iterable
from pathlib import Path

from funnelbox.models.booking import Booking
from funnelbox.models.catalog import LeadSource, ServiceType
from funnelbox.models.import_result import ImportResult, ReportType

from .constants import BOOKING_REPORTS
from .converters import DuplicateRow, row_to_booking
from .errors import RowSkipped, UnsupportedFileType
from .funnel import aggregate_bookings, aggregate_leads
from .mapping import detect_report_type, infer_column_map
from .parsers import ParsedTable, decode_csv_bytes, parse_csv, parse_xlsx
from .resolver import EntityResolver

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {"csv", "xlsx"}


def import_table(
    table: ParsedTable,
    existing_service_types: Iterable[ServiceType] = (),
    existing_lead_sources: Iterable[LeadSource] = (),
    owner_id: str | None = None,
    report_type: ReportType | None = ReportType.LEADS,
    generate_bookings: bool | None = None,
    max_rows: int | None = None,
    source_label: str = "HoneyBook",
    default_service_type: str = "General Service",
    default_lead_source: str = "Direct",
) -> ImportResult:
    """Turn a tokenized report into bookings, catalogs and funnel data.

    Data problems never raise: skipped rows are reported in ``warnings``,
    rows that fail unexpectedly in ``errors``, and the remaining rows are
    still imported.

    Args:
        table: Tokenized report.
        existing_service_types: Caller's service type catalog (not modified).
        existing_lead_sources: Caller's lead source catalog (not modified).
        owner_id: Copied onto every booking.
        report_type: Report layout, or None to detect it from the headers.
        generate_bookings: Keep Booking records. Defaults to True only for
            the Booked Client report; the Leads report feeds the funnel only.
        max_rows: Import at most this many data rows.
        source_label: CRM name used in descriptions and notes.
        default_service_type: Name of the fallback service type.
        default_lead_source: Name of the fallback lead source.

    Returns:
        Frozen ImportResult.
    """
    existing_service_types = list(existing_service_types)
    existing_lead_sources = list(existing_lead_sources)
    errors: list[str] = list(table.errors)
    warnings: list[str] = []

    if report_type is None:
        report_type = detect_report_type(table.headers)
        logger.info("Detected %s report", report_type.value)

    if not table.headers:
        errors.append("No headers found in CSV file")
        return ImportResult(
            report_type=report_type,
            service_types=tuple(existing_service_types),
            lead_sources=tuple(existing_lead_sources),
            errors=tuple(errors),
        )

    rows = table.rows
    line_numbers = table.line_numbers
    if max_rows is not None and len(rows) > max_rows:
        warnings.append(f"File has {len(rows)} rows; only the first {max_rows} were imported")
        rows = rows[:max_rows]
        line_numbers = line_numbers[:max_rows]

    if generate_bookings is None:
        generate_bookings = report_type in BOOKING_REPORTS

    column_map = infer_column_map(table.headers, report_type)
    resolver = EntityResolver(
        existing_service_types,
        existing_lead_sources,
        source_label=source_label,
        default_service_type=default_service_type,
        default_lead_source=default_lead_source,
    )

    # Every converted row, kept or not; the Booked Client funnel is built from these
    converted: list[Booking] = []
    seen_projects: set[str] = set()

    for row, line in zip(rows, line_numbers):
        row_warnings: list[str] = []
        try:
            booking = row_to_booking(
                row,
                column_map,
                resolver,
                booking_id=f"imported-{report_type.value}-{line}",
                report_type=report_type,
                owner_id=owner_id,
                seen_projects=seen_projects,
                row_warnings=row_warnings,
            )
            converted.append(booking)
        except DuplicateRow as e:
            logger.debug("Row %d: %s", line, e.reason)
        except RowSkipped as e:
            warnings.append(f"Row {line}: {e.reason}")
        except Exception as e:
            errors.append(f"Row {line}: {e}")
            logger.warning("Import error on row %d: %s", line, e)
        warnings.extend(f"Row {line}: {w}" for w in row_warnings)

    bookings = converted if generate_bookings else []
    if report_type is ReportType.LEADS:
        funnel_data = aggregate_leads(rows, column_map, source_label)
    else:
        funnel_data = aggregate_bookings(converted, source_label)

    logger.info(
        "Imported %s report: %d rows, %d bookings, %d funnel months, %d errors, %d warnings",
        report_type.value,
        len(rows),
        len(bookings),
        len(funnel_data),
        len(errors),
        len(warnings),
    )

    return ImportResult(
        report_type=report_type,
        rows_read=len(rows),
        bookings=tuple(bookings),
        funnel_data=tuple(funnel_data),
        service_types=tuple(resolver.service_types),
        lead_sources=tuple(resolver.lead_sources),
        errors=tuple(errors),
        warnings=tuple(warnings),
    )


def import_report(
    csv_text: str,
    existing_service_types: Iterable[ServiceType] = (),
    existing_lead_sources: Iterable[LeadSource] = (),
    owner_id: str | None = None,
    **options,
) -> ImportResult:
    """Import a CRM report from CSV text.

    Keyword options are those of :func:`import_table`.
    """
    return import_table(
        parse_csv(csv_text),
        existing_service_types,
        existing_lead_sources,
        owner_id=owner_id,
        **options,
    )


def get_file_extension(filename: str | None) -> str:
    """Extract the lower-cased file extension from a filename."""
    if not filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def load_table(filename: str | None, content: bytes) -> ParsedTable:
    """Tokenize an uploaded report file by its extension.

    Raises:
        UnsupportedFileType: The extension is not csv or xlsx.
    """
    ext = get_file_extension(filename)
    if ext == "csv":
        return parse_csv(decode_csv_bytes(content))
    if ext == "xlsx":
        return parse_xlsx(content)
    raise UnsupportedFileType(f"Unsupported file type '.{ext}'. Allowed: CSV, XLSX")


def import_report_file(path: Path | str, **kwargs) -> ImportResult:
    """Read a .csv or .xlsx report from disk and import it."""
    path = Path(path)
    return import_table(load_table(path.name, path.read_bytes()), **kwargs)
