"""Constants for CRM report imports."""

from funnelbox.models.import_result import ReportType

# Bump when an alias list changes so stored imports can be traced to a table
ALIAS_TABLE_VERSION = 2

# Canonical fields every ColumnMap carries, in display order
CANONICAL_FIELDS = [
    "project_name",
    "client_name",
    "client_email",
    "client_phone",
    "service_type",
    "lead_source",
    "lead_source_open_text",
    "date_booked",
    "project_date",
    "date_inquired",
    "total_amount",
    "status",
    "notes",
]

# HoneyBook "Leads" report. Exact export columns:
# #, Project Name, Full Name, Email Address, Phone Number, Project Date,
# Lead Created Date, Total Project Value, Lead Source, Lead Source Open Text,
# Booked Date
LEADS_REPORT_ALIASES: dict[str, list[str]] = {
    "project_name": ["project name", "project", "event name", "event", "job name", "job"],
    "client_name": ["full name", "client name", "client", "customer name", "customer", "contact name"],
    "client_email": ["email address", "client email", "email", "contact email", "customer email"],
    "client_phone": ["phone number", "client phone", "phone", "contact phone"],
    # Not in the Leads report; falls back to the default service type
    "service_type": ["service type", "service", "package", "product"],
    "lead_source": ["lead source", "source", "referral source", "how did you hear"],
    "lead_source_open_text": ["lead source open text", "lead source detail", "source detail"],
    "date_booked": ["booked date", "booking date", "signed date", "contract date", "date booked", "booked on"],
    "project_date": ["project date", "event date", "shoot date", "session date", "service date"],
    "date_inquired": [
        "lead created date",
        "date inquired",
        "inquiry date",
        "contacted date",
        "first contact",
        "created date",
    ],
    "total_amount": [
        "total project value",
        "total amount",
        "total",
        "amount",
        "price",
        "revenue",
        "contract value",
        "project value",
    ],
    # Not in the Leads report; status is inferred from Booked Date
    "status": ["status", "project status", "booking status"],
    "notes": ["notes", "description", "comments", "internal notes"],
}

# HoneyBook "Booked Client" report. One row per project participant:
# First Name, Last Name, Email, Project Name, Project Type, Project Source,
# Project Creation Date, Project Date, Booked Date, Total Booked Value
BOOKED_CLIENT_REPORT_ALIASES: dict[str, list[str]] = {
    "project_name": ["project name", "project"],
    "client_email": ["email"],
    "service_type": ["project type", "service type", "type"],
    "lead_source": ["project source", "lead source", "source"],
    "date_inquired": ["project creation date", "creation date", "created date", "date created"],
    "project_date": ["project date", "event date", "service date"],
    "date_booked": ["booked date", "date booked", "signed date"],
    "total_amount": ["total booked value", "booked value", "total", "amount", "revenue"],
}

REPORT_ALIASES: dict[ReportType, dict[str, list[str]]] = {
    ReportType.LEADS: LEADS_REPORT_ALIASES,
    ReportType.BOOKED_CLIENTS: BOOKED_CLIENT_REPORT_ALIASES,
}

# Reports whose rows become Booking records; the rest only feed the funnel
BOOKING_REPORTS = {ReportType.BOOKED_CLIENTS}

# Headers that only appear in the Booked Client report
BOOKED_CLIENT_MARKERS = ["total booked value", "project creation date", "project source"]

# Date cells that mean "not scheduled yet"
UNSCHEDULED_DATE_TOKENS = {"tbd", "tba", "n/a"}

DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S UTC",  # Booked Client report
    "%Y-%m-%d %H:%M:%S",
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%Y/%m/%d",
    "%b %d, %Y",  # Leads report, e.g. "Jun 30, 2025"
    "%B %d, %Y",
]

CURRENCY_SYMBOLS = "$£€¥"
