"""Unit tests for report tokenizing and cell value parsing."""

import io
from datetime import date, datetime
from decimal import Decimal

from openpyxl import Workbook

from funnelbox.services.import_service import (
    decode_csv_bytes,
    parse_cents,
    parse_csv,
    parse_date,
    parse_number,
    parse_xlsx,
)


# =============================================================================
# CSV Tokenizer Tests
# =============================================================================


def test_parse_csv_basic() -> None:
    """Test headers and rows keyed by header name."""
    table = parse_csv("Project Name,Lead Source\nSmith Wedding,Instagram\nLee Portraits,Google\n")
    assert table.headers == ["Project Name", "Lead Source"]
    assert len(table.rows) == 2
    assert table.rows[0] == {"Project Name": "Smith Wedding", "Lead Source": "Instagram"}
    assert table.line_numbers == [2, 3]
    assert table.errors == []


def test_parse_csv_quoted_fields() -> None:
    """Test commas and doubled quotes inside quoted cells."""
    text = 'Name,Date,Notes\n"Smith, Jane","Jun 30, 2025","She said ""yes"""\n'
    table = parse_csv(text)
    assert table.rows[0]["Name"] == "Smith, Jane"
    assert table.rows[0]["Date"] == "Jun 30, 2025"
    assert table.rows[0]["Notes"] == 'She said "yes"'


def test_parse_csv_quoted_newline_keeps_line_numbers() -> None:
    """Test a multi-line cell keeps its row start line and later line numbers."""
    text = 'Name,Notes\nA,"line one\nline two"\nB,short\n'
    table = parse_csv(text)
    assert [r["Name"] for r in table.rows] == ["A", "B"]
    assert table.rows[0]["Notes"] == "line one\nline two"
    assert table.line_numbers == [2, 4]


def test_parse_csv_skips_blank_lines() -> None:
    """Test blank lines and all-empty records are skipped."""
    text = "\n\nName,Amount\nA,1\n\n,\nB,2\n"
    table = parse_csv(text)
    assert table.headers == ["Name", "Amount"]
    assert [r["Name"] for r in table.rows] == ["A", "B"]
    assert table.errors == []


def test_parse_csv_malformed_row_reported() -> None:
    """Test a row with the wrong cell count is reported and left out."""
    text = "Name,Amount,Source\nA,1,Web\nB,2\nC,3,Web\n"
    table = parse_csv(text)
    assert [r["Name"] for r in table.rows] == ["A", "C"]
    assert len(table.errors) == 1
    assert "line 3" in table.errors[0]
    assert "expected 3 fields, found 2" in table.errors[0]


def test_parse_csv_oversized_cell_skips_only_that_row() -> None:
    """Test a cell over the csv field limit is reported and later rows still parse."""
    text = "Name,Notes\nA,x\nB," + "x" * 200000 + "\nC,y\nD,z\n"
    table = parse_csv(text)
    assert [r["Name"] for r in table.rows] == ["A", "C", "D"]
    assert table.line_numbers == [2, 4, 5]
    assert len(table.errors) == 1
    assert table.errors[0].startswith("Malformed row at line 3:")


def test_parse_csv_trailing_padding_allowed() -> None:
    """Test empty cells past the last header are ignored."""
    table = parse_csv("Name,Amount\nA,1,,\n")
    assert table.rows == [{"Name": "A", "Amount": "1"}]
    assert table.errors == []


def test_parse_csv_extra_values_are_malformed() -> None:
    """Test non-empty cells past the last header are an error."""
    table = parse_csv("Name,Amount\nA,1,oops\n")
    assert table.rows == []
    assert len(table.errors) == 1


def test_parse_csv_strips_cells_and_headers() -> None:
    """Test surrounding whitespace is removed."""
    table = parse_csv(" Name , Amount \n  A  , 1 \n")
    assert table.headers == ["Name", "Amount"]
    assert table.rows[0] == {"Name": "A", "Amount": "1"}


def test_parse_csv_bom() -> None:
    """Test a UTF-8 byte order mark does not end up in the first header."""
    table = parse_csv("\ufeffProject Name,Total\nA,1\n")
    assert table.headers[0] == "Project Name"


def test_parse_csv_empty() -> None:
    """Test empty input has no headers and no rows."""
    table = parse_csv("")
    assert table.headers == []
    assert table.rows == []


def test_parse_csv_headers_only() -> None:
    """Test a header row without data."""
    table = parse_csv("Name,Amount\n")
    assert table.headers == ["Name", "Amount"]
    assert table.rows == []


def test_decode_csv_bytes_utf8_and_latin1() -> None:
    """Test UTF-8 (with BOM) and Latin-1 decoding."""
    assert decode_csv_bytes("\ufeffCafé".encode("utf-8")) == "Café"
    assert decode_csv_bytes("Café".encode("latin-1")) == "Café"


# =============================================================================
# XLSX Tests
# =============================================================================


def _make_xlsx(headers: list[str], rows: list[list]) -> bytes:
    """Helper to create XLSX bytes from headers and rows."""
    wb = Workbook()
    ws = wb.active
    ws.append(headers)
    for row in rows:
        ws.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def test_parse_xlsx_basic() -> None:
    """Test XLSX rows become strings, with dates in ISO format."""
    content = _make_xlsx(
        ["Project Name", "Lead Created Date", "Total Project Value"],
        [
            ["Smith Wedding", datetime(2025, 1, 10), 5000],
            ["Lee Portraits", "Jan 20, 2025", None],
        ],
    )
    table = parse_xlsx(content)
    assert table.headers == ["Project Name", "Lead Created Date", "Total Project Value"]
    assert len(table.rows) == 2
    assert table.rows[0]["Lead Created Date"] == "2025-01-10"
    assert table.rows[0]["Total Project Value"] == "5000"
    assert table.rows[1]["Total Project Value"] == ""
    assert table.line_numbers == [2, 3]


# =============================================================================
# Date Parsing Tests
# =============================================================================


def test_parse_date_formats() -> None:
    """Test the date layouts found in CRM exports."""
    expected = date(2025, 6, 30)
    assert parse_date("2025-06-30") == expected
    assert parse_date("2025-06-30 13:38:59 UTC") == expected
    assert parse_date("2025-06-30 13:38:59") == expected
    assert parse_date("06/30/2025") == expected
    assert parse_date("6/30/2025") == expected
    assert parse_date("06-30-2025") == expected
    assert parse_date("2025/06/30") == expected
    assert parse_date("Jun 30, 2025") == expected
    assert parse_date("June 30, 2025") == expected
    assert parse_date("2025-06-30T13:38:59+00:00") == expected


def test_parse_date_missing_values() -> None:
    """Test empty, TBD and garbage return None rather than raising."""
    assert parse_date("") is None
    assert parse_date(None) is None
    assert parse_date("   ") is None
    assert parse_date("TBD") is None
    assert parse_date("tbd") is None
    assert parse_date("next spring") is None
    assert parse_date("2025-02-30") is None


# =============================================================================
# Money Parsing Tests
# =============================================================================


def test_parse_number() -> None:
    """Test currency symbols and separators are ignored."""
    assert parse_number("$4,500.00") == Decimal("4500.00")
    assert parse_number("12%") == Decimal("12")
    assert parse_number("(1,200.50)") == Decimal("-1200.50")
    assert parse_number("-75") == Decimal("-75")
    assert parse_number("") is None
    assert parse_number("$") is None
    assert parse_number("n/a") is None
    assert parse_number("NaN") is None


def test_parse_cents() -> None:
    """Test conversion to integer cents."""
    assert parse_cents("$5,000.00") == 500000
    assert parse_cents("1250.50") == 125050
    assert parse_cents("0.005") == 1
    assert parse_cents("19.994") == 1999
    assert parse_cents("€10") == 1000


def test_parse_cents_zero_is_not_missing() -> None:
    """Test $0 parses to 0 while an empty cell is None."""
    assert parse_cents("$0.00") == 0
    assert parse_cents("") is None
    assert parse_cents("abc") is None


def test_parse_cents_no_float_drift() -> None:
    """Test values that drift under float multiplication stay exact."""
    assert parse_cents("1.15") == 115
    assert parse_cents("4.35") == 435
    assert sum(parse_cents("0.10") for _ in range(10)) == 100


def test_parse_cents_too_many_digits() -> None:
    """Test amounts beyond decimal precision are unparseable, not an exception."""
    assert parse_cents("1e30") is None
    assert parse_cents("1" + "0" * 29) is None
    assert parse_cents("9" * 26) == int("9" * 26) * 100
