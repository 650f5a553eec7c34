"""Report import tool for FunnelBox.

Commands:
    run       Import a CSV/XLSX report and print the funnel summary or JSON
    columns   Show which report column each canonical field was matched to
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from funnelbox.config import settings
from funnelbox.logging_config import configure_logging
from funnelbox.models import ImportResult, LeadSource, ServiceType
from funnelbox.schemas.import_schemas import ImportResultResponse, ReportTypeParam
from funnelbox.services.import_service import (
    CANONICAL_FIELDS,
    ImportServiceError,
    detect_report_type,
    import_table,
    infer_column_map,
    load_table,
)


class CatalogFile(BaseModel):
    """Existing catalogs read from a JSON file."""

    service_types: list[ServiceType] = Field(default_factory=list)
    lead_sources: list[LeadSource] = Field(default_factory=list)


def load_catalog(path: Path | None) -> CatalogFile:
    """Load existing catalogs from JSON, or return empty catalogs."""
    if path is None:
        return CatalogFile()
    return CatalogFile.model_validate_json(path.read_text())


def format_cents(cents: int) -> str:
    """Format cents as dollars with thousands separators."""
    sign = "-" if cents < 0 else ""
    dollars, rem = divmod(abs(cents), 100)
    return f"{sign}${dollars:,}.{rem:02d}"


def print_summary(result: ImportResult) -> None:
    """Print funnel months, new entities and diagnostics as text."""
    print(f"Report type: {result.report_type.value}")
    print(f"Rows read:   {result.rows_read}")
    print(f"Bookings:    {len(result.bookings)}")
    print()

    if result.funnel_data:
        print(f"{'Month':<8} {'Inquiries':>9} {'Closes':>7} {'Bookings':>14} {'Inq YTD':>8} {'Bookings YTD':>14}")
        print("-" * 66)
        for month in result.funnel_data:
            print(
                f"{month.year}-{month.month:02d}  {month.inquiries:>9} {month.closes:>7} "
                f"{format_cents(month.bookings):>14} {month.inquiries_ytd:>8} "
                f"{format_cents(month.bookings_ytd):>14}"
            )
    else:
        print("No funnel data.")

    new_entities = [e for e in (*result.service_types, *result.lead_sources) if e.is_custom]
    if new_entities:
        print()
        print("Catalog entries:")
        for entity in new_entities:
            kind = "service type" if isinstance(entity, ServiceType) else "lead source"
            print(f"  {entity.id:<24} {kind:<13} {entity.name}")

    for label, messages in (("Errors", result.errors), ("Warnings", result.warnings)):
        if messages:
            print()
            print(f"{label}:")
            for message in messages:
                print(f"  {message}")


def run_import(args: argparse.Namespace) -> int:
    """Import a report file and print the result."""
    try:
        catalog = load_catalog(args.catalog)
    except (OSError, ValidationError) as e:
        print(f"Error: Could not read catalog file: {e}", file=sys.stderr)
        return 1

    try:
        table = load_table(args.file.name, args.file.read_bytes())
    except (OSError, ImportServiceError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = import_table(
        table,
        catalog.service_types,
        catalog.lead_sources,
        owner_id=args.owner_id,
        report_type=ReportTypeParam(args.report_type).to_report_type(),
        max_rows=args.max_rows,
        source_label=settings.import_source_label,
        default_service_type=settings.default_service_type,
        default_lead_source=settings.default_lead_source,
    )

    if args.json:
        print(ImportResultResponse.from_result(result).model_dump_json(indent=2))
    else:
        print_summary(result)

    if args.strict and result.errors:
        return 1
    return 0


def show_columns(args: argparse.Namespace) -> int:
    """Print the inferred column mapping for a report file."""
    try:
        table = load_table(args.file.name, args.file.read_bytes())
    except (OSError, ImportServiceError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report_type = ReportTypeParam(args.report_type).to_report_type() or detect_report_type(table.headers)
    column_map = infer_column_map(table.headers, report_type)

    if args.json:
        print(json.dumps({"report_type": report_type.value, "columns": column_map.model_dump()}, indent=2))
        return 0

    print(f"Report type: {report_type.value}")
    print(f"{'Field':<24} {'Column':<30}")
    print("-" * 55)
    for field in CANONICAL_FIELDS:
        header = getattr(column_map, field)
        print(f"{field:<24} {header if header is not None else '(not found)':<30}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Import CRM report exports into FunnelBox",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--log-level", help="Logging level (default from config)")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    report_types = [p.value for p in ReportTypeParam]

    run_parser = subparsers.add_parser("run", help="Import a report file")
    run_parser.add_argument("file", type=Path, help="CSV or XLSX report export")
    run_parser.add_argument(
        "--report-type", "-t", choices=report_types, default=settings.default_report_type
    )
    run_parser.add_argument("--owner-id", "-o", help="Owner id copied onto bookings")
    run_parser.add_argument("--catalog", "-c", type=Path, help="JSON file with existing catalogs")
    run_parser.add_argument("--max-rows", type=int, default=settings.max_import_rows)
    run_parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    run_parser.add_argument("--strict", action="store_true", help="Exit 1 when the import has errors")

    columns_parser = subparsers.add_parser("columns", help="Show the inferred column mapping")
    columns_parser.add_argument("file", type=Path, help="CSV or XLSX report export")
    columns_parser.add_argument("--report-type", "-t", choices=report_types, default="auto")
    columns_parser.add_argument("--json", action="store_true", help="Print the mapping as JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.log_level)

    if args.command == "run":
        return run_import(args)
    return show_columns(args)


if __name__ == "__main__":
    sys.exit(main())
