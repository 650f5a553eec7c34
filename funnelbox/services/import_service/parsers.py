"""File tokenizing and cell value parsing for CRM report imports."""

import csv
import io
import logging
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import NamedTuple

from openpyxl import load_workbook

from .constants import CURRENCY_SYMBOLS, DATE_FORMATS, UNSCHEDULED_DATE_TOKENS

logger = logging.getLogger(__name__)


class ParsedTable(NamedTuple):
    """Tokenized report: header names, one dict per data row, diagnostics.

    ``line_numbers[i]`` is the 1-indexed source line of ``rows[i]``; the
    header is line 1.
    """

    headers: list[str]
    rows: list[dict[str, str]]
    line_numbers: list[int]
    errors: list[str]


def _clean_headers(raw_headers: list[str]) -> list[str]:
    """Strip header names, dropping trailing blanks and naming inner blanks."""
    headers = [h.strip() for h in raw_headers]
    while headers and not headers[-1]:
        headers.pop()
    return [h or f"Column {i + 1}" for i, h in enumerate(headers)]


def decode_csv_bytes(file_content: bytes) -> str:
    """Decode uploaded CSV bytes. Tries UTF-8 (with or without BOM), then Latin-1."""
    try:
        return file_content.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.debug("CSV is not valid UTF-8, decoding as Latin-1")
        return file_content.decode("latin-1")


def parse_csv(text: str) -> ParsedTable:
    """Split CSV text into headers and rows keyed by header name.

    The first non-blank record is the header row. Blank records are skipped.
    A record with the wrong number of cells is reported in ``errors`` and
    left out; the remaining records are still parsed.

    Args:
        text: Decoded CSV text.

    Returns:
        ParsedTable. ``headers`` is empty when the text has no header row.
    """
    headers: list[str] = []
    rows: list[dict[str, str]] = []
    line_numbers: list[int] = []
    errors: list[str] = []

    reader = csv.reader(io.StringIO(text.lstrip("\ufeff"), newline=""))
    # A quoted cell can span lines; a record starts right after the previous one ends
    last_line = 0
    while True:
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            errors.append(f"Malformed row at line {last_line + 1}: {e}")
            last_line = reader.line_num
            continue
        start_line, last_line = last_line + 1, reader.line_num
        if not any(cell.strip() for cell in record):
            continue

        if not headers:
            headers = _clean_headers(record)
            continue

        # Trailing empty cells past the last header are export padding
        while len(record) > len(headers) and not record[-1].strip():
            record.pop()

        if len(record) != len(headers):
            errors.append(
                f"Malformed row at line {start_line}: "
                f"expected {len(headers)} fields, found {len(record)}"
            )
            continue

        rows.append({h: cell.strip() for h, cell in zip(headers, record)})
        line_numbers.append(start_line)

    return ParsedTable(headers, rows, line_numbers, errors)


def _cell_to_text(value: object) -> str:
    """Render a worksheet cell the way it would appear in a CSV export."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def parse_xlsx(file_content: bytes) -> ParsedTable:
    """Parse XLSX file content into a ParsedTable (first sheet only).

    Uses openpyxl read_only mode and iterates rows lazily.

    Args:
        file_content: Raw XLSX file bytes.

    Returns:
        ParsedTable; line numbers are worksheet row numbers.
    """
    wb = load_workbook(filename=io.BytesIO(file_content), read_only=True, data_only=True)
    try:
        ws = wb.active
        if ws is None:
            return ParsedTable([], [], [], ["XLSX file has no worksheets"])

        headers: list[str] = []
        rows: list[dict[str, str]] = []
        line_numbers: list[int] = []

        for row_number, row_values in enumerate(ws.iter_rows(values_only=True), start=1):
            cells = [_cell_to_text(v) for v in row_values]
            if not any(cells):
                continue
            if not headers:
                headers = _clean_headers(cells)
                continue
            rows.append({h: cells[j] if j < len(cells) else "" for j, h in enumerate(headers)})
            line_numbers.append(row_number)

        return ParsedTable(headers, rows, line_numbers, [])
    finally:
        wb.close()


# =============================================================================
# Cell value parsers
# =============================================================================


def parse_date(value: str | None) -> date | None:
    """Parse a report date cell.

    Understands the HoneyBook report formats (``Jun 30, 2025`` and
    ``2025-01-18 13:38:59 UTC``) plus common numeric layouts.

    Returns:
        The calendar date, or None for empty, ``TBD`` or unrecognised input.
    """
    if not value:
        return None
    text = value.strip()
    if not text or text.lower() in UNSCHEDULED_DATE_TOKENS:
        return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_number(value: str | None) -> Decimal | None:
    """Parse a numeric cell, ignoring currency symbols, separators and ``%``.

    Accounting negatives such as ``(1,200.00)`` are supported.
    """
    if not value:
        return None
    cleaned = value.strip()
    for char in CURRENCY_SYMBOLS + ",% ":
        cleaned = cleaned.replace(char, "")
    negative = cleaned.startswith("(") and cleaned.endswith(")")
    if negative:
        cleaned = cleaned[1:-1]
    if not cleaned:
        return None

    try:
        number = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return -number if negative else number


def parse_cents(value: str | None) -> int | None:
    """Parse a money cell into integer cents, rounding half up.

    Returns:
        Cents, or None when the cell is empty or not a number. A cell of
        ``$0.00`` returns 0, not None.
    """
    number = parse_number(value)
    if number is None:
        return None
    try:
        return int((number * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # More digits than the decimal context can hold
        return None
