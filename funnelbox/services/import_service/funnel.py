"""Monthly funnel aggregation with year-to-date running totals."""

import logging
from collections.abc import Iterable

from funnelbox.models.booking import Booking
from funnelbox.models.funnel import FunnelData

from .converters import revenue_cents
from .mapping import ColumnMap
from .parsers import parse_date

logger = logging.getLogger(__name__)


class _MonthBucket:
    """Mutable counters for one (year, month) while scanning rows."""

    __slots__ = ("year", "month", "inquiries", "closes", "bookings")

    def __init__(self, year: int, month: int):
        self.year = year
        self.month = month
        self.inquiries = 0
        self.closes = 0
        self.bookings = 0


def _bucket(buckets: dict[tuple[int, int], _MonthBucket], year: int, month: int) -> _MonthBucket:
    key = (year, month)
    if key not in buckets:
        buckets[key] = _MonthBucket(year, month)
    return buckets[key]


def _to_series(buckets: Iterable[_MonthBucket], id_prefix: str, notes: str) -> list[FunnelData]:
    """Sort buckets chronologically and attach year-to-date totals.

    YTD runs over the sorted series and restarts whenever the year changes.
    """
    series: list[FunnelData] = []
    inquiries_ytd = 0
    bookings_ytd = 0
    previous_year: int | None = None

    for b in sorted(buckets, key=lambda b: (b.year, b.month)):
        if b.year != previous_year:
            inquiries_ytd = 0
            bookings_ytd = 0
            previous_year = b.year
        inquiries_ytd += b.inquiries
        bookings_ytd += b.bookings
        series.append(
            FunnelData(
                id=f"{id_prefix}-{b.year}-{b.month}",
                year=b.year,
                month=b.month,
                inquiries=b.inquiries,
                closes=b.closes,
                bookings=b.bookings,
                inquiries_ytd=inquiries_ytd,
                bookings_ytd=bookings_ytd,
                notes=notes,
            )
        )

    return series


def aggregate_leads(
    rows: Iterable[dict[str, str]],
    column_map: ColumnMap,
    source_label: str = "HoneyBook",
) -> list[FunnelData]:
    """Build the funnel series from a Leads report.

    Every row with an inquiry date counts as an inquiry in its inquiry
    month. Rows that also have a booked date count as a close, and their
    revenue is added, in that same inquiry month.

    Args:
        rows: All data rows of the report, including rows that were not
            turned into bookings.
        column_map: Inferred columns for the report.
        source_label: CRM name used in the funnel notes.

    Returns:
        One FunnelData per month with at least one inquiry, oldest first.
    """
    buckets: dict[tuple[int, int], _MonthBucket] = {}

    for row in rows:
        inquired = parse_date(column_map.cell(row, "date_inquired"))
        if inquired is None:
            continue

        bucket = _bucket(buckets, inquired.year, inquired.month)
        bucket.inquiries += 1

        if parse_date(column_map.cell(row, "date_booked")) is not None:
            bucket.closes += 1
            bucket.bookings += revenue_cents(row, column_map)

    logger.debug("Aggregated leads funnel over %d months", len(buckets))
    return _to_series(buckets.values(), "imported-funnel", f"Imported from {source_label}")


def aggregate_bookings(bookings: Iterable[Booking], source_label: str = "HoneyBook") -> list[FunnelData]:
    """Build closes and revenue per booked month from imported bookings.

    Inquiries are left at zero; they come from the Leads report.
    """
    buckets: dict[tuple[int, int], _MonthBucket] = {}

    for booking in bookings:
        if booking.date_booked is None:
            continue
        bucket = _bucket(buckets, booking.date_booked.year, booking.date_booked.month)
        bucket.closes += 1
        bucket.bookings += booking.booked_revenue

    return _to_series(
        buckets.values(),
        "imported-funnel-booked",
        f"Imported from {source_label} Booked Client report (closes and bookings only)",
    )
