"""Pytest configuration and fixtures for FunnelBox tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from funnelbox.config.settings import reset_settings
from funnelbox.models import LeadSource, ServiceType

LEADS_HEADER = (
    "#,Project Name,Full Name,Email Address,Phone Number,Project Date,"
    "Lead Created Date,Total Project Value,Lead Source,Lead Source Open Text,Booked Date"
)

BOOKED_CLIENT_HEADER = (
    "First Name,Last Name,Email,Project Name,Project Type,Project Source,"
    "Project Creation Date,Project Date,Booked Date,Total Booked Value"
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    """Load settings from defaults, not from a developer's config.toml."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("funnelbox.config.loader.find_config_file", lambda: None)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def leads_csv() -> str:
    """HoneyBook Leads report export spanning a year boundary."""
    return "\n".join(
        [
            LEADS_HEADER,
            '1,Smith Wedding,Jane Smith,jane@example.com,555-0100,"Sep 6, 2025","Nov 12, 2024","$4,500.00",Instagram,,"Dec 1, 2024"',
            '2,Lee Portraits,Sam Lee,sam@example.com,,TBD,"Dec 3, 2024",$800.00,Google Ads,,',
            '3,Garcia Elopement,Ana Garcia,,,"Oct 4, 2025","Jan 8, 2025","$2,000.00",Vendor Referral,Veronica - Estate at Bluemont,"Feb 2, 2025"',
            '4,Chen Family,Li Chen,,,,"Jan 20, 2025",$0.00,instagram,"""""",',
            '5,Patel Engagement,Raj Patel,,,,"Feb 14, 2025","$1,250.50",Google Ads,,"Feb 20, 2025"',
        ]
    )


@pytest.fixture
def booked_clients_csv() -> str:
    """HoneyBook Booked Client report with two participants on one project."""
    return "\n".join(
        [
            BOOKED_CLIENT_HEADER,
            "Jane,Smith,jane@example.com,Smith Wedding,Wedding,Instagram,2024-11-12 10:00:00 UTC,2025-09-06,2024-12-01 09:30:00 UTC,4500",
            "John,Smith,john@example.com,Smith Wedding,Wedding,Instagram,2024-11-12 10:00:00 UTC,2025-09-06,2024-12-01 09:30:00 UTC,4500",
            "Ana,Garcia,ana@example.com,Garcia Elopement,Elopement,Vendor Referral,2025-01-08 08:00:00 UTC,2025-10-04,2025-02-02 12:00:00 UTC,2000",
            "Raj,Patel,raj@example.com,Patel Engagement,Engagement,Google Ads,2025-02-14 08:00:00 UTC,,,1250.50",
        ]
    )


@pytest.fixture
def existing_service_types() -> list[ServiceType]:
    return [
        ServiceType(id="st-wedding", name="Wedding", description="Full-day coverage"),
        ServiceType(id="st-portrait", name="Portrait"),
    ]


@pytest.fixture
def existing_lead_sources() -> list[LeadSource]:
    return [
        LeadSource(id="ls-google", name="Google Ads"),
        LeadSource(id="ls-referral", name="Referral"),
    ]


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client for the import API."""
    from funnelbox.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
