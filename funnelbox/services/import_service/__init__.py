"""Import service package for turning CRM reports into bookings and funnel data."""

from .constants import (
    ALIAS_TABLE_VERSION,
    BOOKED_CLIENT_REPORT_ALIASES,
    CANONICAL_FIELDS,
    LEADS_REPORT_ALIASES,
    REPORT_ALIASES,
)
from .converters import DuplicateRow, lead_source_name, revenue_cents, row_to_booking
from .errors import ImportServiceError, RowSkipped, UnsupportedFileType
from .funnel import aggregate_bookings, aggregate_leads
from .mapping import ColumnMap, detect_report_type, find_column, infer_column_map
from .parsers import (
    ParsedTable,
    decode_csv_bytes,
    parse_cents,
    parse_csv,
    parse_date,
    parse_number,
    parse_xlsx,
)
from .processor import (
    ALLOWED_EXTENSIONS,
    get_file_extension,
    import_report,
    import_report_file,
    import_table,
    load_table,
)
from .resolver import EntityCatalog, EntityKind, EntityResolver

__all__ = [
    # Constants
    "ALIAS_TABLE_VERSION",
    "ALLOWED_EXTENSIONS",
    "BOOKED_CLIENT_REPORT_ALIASES",
    "CANONICAL_FIELDS",
    "LEADS_REPORT_ALIASES",
    "REPORT_ALIASES",
    # Errors
    "DuplicateRow",
    "ImportServiceError",
    "RowSkipped",
    "UnsupportedFileType",
    # Parsers
    "ParsedTable",
    "decode_csv_bytes",
    "parse_cents",
    "parse_csv",
    "parse_date",
    "parse_number",
    "parse_xlsx",
    # Mapping
    "ColumnMap",
    "detect_report_type",
    "find_column",
    "infer_column_map",
    # Entities
    "EntityCatalog",
    "EntityKind",
    "EntityResolver",
    # Converters
    "lead_source_name",
    "revenue_cents",
    "row_to_booking",
    # Funnel
    "aggregate_bookings",
    "aggregate_leads",
    # Processor
    "get_file_extension",
    "import_report",
    "import_report_file",
    "import_table",
    "load_table",
]
