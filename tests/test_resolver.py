"""Unit tests for service type and lead source resolution."""

from funnelbox.models import LeadSource, ServiceType
from funnelbox.services.import_service import EntityKind, EntityResolver


class TestResolveExisting:
    """Tests for names already in the seed catalog."""

    def test_existing_name_returns_seed_id(self, existing_service_types, existing_lead_sources):
        resolver = EntityResolver(existing_service_types, existing_lead_sources)
        assert resolver.resolve(EntityKind.SERVICE_TYPE, "Wedding") == "st-wedding"
        assert resolver.resolve(EntityKind.LEAD_SOURCE, "Google Ads") == "ls-google"
        assert len(resolver.service_types) == 2
        assert len(resolver.lead_sources) == 2

    def test_lookup_is_case_insensitive(self, existing_service_types, existing_lead_sources):
        """Test "google ads" and "GOOGLE ADS" resolve to the seeded "Google Ads"."""
        resolver = EntityResolver(existing_service_types, existing_lead_sources)
        assert resolver.resolve(EntityKind.LEAD_SOURCE, "google ads") == "ls-google"
        assert resolver.resolve(EntityKind.LEAD_SOURCE, "  GOOGLE ADS ") == "ls-google"
        assert len(resolver.lead_sources) == 2

    def test_duplicate_seed_names_first_wins(self):
        """Test a seed with case-variant duplicates resolves to the first one."""
        seeds = [LeadSource(id="a", name="Instagram"), LeadSource(id="b", name="instagram")]
        resolver = EntityResolver([], seeds)
        assert resolver.resolve(EntityKind.LEAD_SOURCE, "INSTAGRAM") == "a"


class TestCreateEntities:
    """Tests for lazily created entities."""

    def test_new_name_creates_entity(self, existing_service_types, existing_lead_sources):
        resolver = EntityResolver(existing_service_types, existing_lead_sources)
        new_id = resolver.resolve(EntityKind.LEAD_SOURCE, "Instagram")

        assert new_id == "imported-ls-2"
        created = resolver.lead_sources[-1]
        assert created.id == new_id
        assert created.name == "Instagram"
        assert created.description == "Imported from HoneyBook"
        assert created.is_custom is True

    def test_created_once_per_name(self):
        """Test case variants within one import share the created entity."""
        resolver = EntityResolver([], [])
        first = resolver.resolve(EntityKind.LEAD_SOURCE, "Instagram")
        second = resolver.resolve(EntityKind.LEAD_SOURCE, "instagram")
        third = resolver.resolve(EntityKind.LEAD_SOURCE, "INSTAGRAM ")
        assert first == second == third
        assert [ls.name for ls in resolver.lead_sources] == ["Instagram"]

    def test_ids_are_deterministic(self):
        """Test two runs over the same names give the same ids and order."""
        names = ["Instagram", "Google", "instagram", "Yelp"]

        def run() -> list[tuple[str, str]]:
            resolver = EntityResolver([], [])
            for name in names:
                resolver.resolve(EntityKind.LEAD_SOURCE, name)
            return [(ls.id, ls.name) for ls in resolver.lead_sources]

        assert run() == run()
        assert run() == [
            ("imported-ls-0", "Instagram"),
            ("imported-ls-1", "Google"),
            ("imported-ls-2", "Yelp"),
        ]

    def test_new_ids_skip_ids_already_in_seed(self):
        """Test ids left by an earlier import are never reused."""
        seeds = [LeadSource(id="imported-ls-1", name="Instagram")]
        resolver = EntityResolver([], seeds)
        new_id = resolver.resolve(EntityKind.LEAD_SOURCE, "Yelp")
        assert new_id == "imported-ls-2"
        assert len({ls.id for ls in resolver.lead_sources}) == 2

    def test_custom_source_label(self):
        resolver = EntityResolver([], [], source_label="Dubsado")
        resolver.resolve(EntityKind.SERVICE_TYPE, "Headshots")
        assert resolver.service_types[0].description == "Imported from Dubsado"


class TestFallback:
    """Tests for rows that name no entity."""

    def test_blank_name_uses_first_catalog_entry(self, existing_service_types, existing_lead_sources):
        resolver = EntityResolver(existing_service_types, existing_lead_sources)
        assert resolver.resolve(EntityKind.SERVICE_TYPE, "") == "st-wedding"
        assert resolver.resolve(EntityKind.LEAD_SOURCE, None) == "ls-google"
        assert len(resolver.service_types) == 2

    def test_blank_name_with_empty_catalog_creates_default(self):
        resolver = EntityResolver([], [])
        st_id = resolver.resolve(EntityKind.SERVICE_TYPE, "   ")
        ls_id = resolver.resolve(EntityKind.LEAD_SOURCE, "")

        assert st_id == "imported-st-default"
        assert ls_id == "imported-ls-default"
        assert resolver.service_types[0].name == "General Service"
        assert resolver.service_types[0].description == "Default service type for imported bookings"
        assert resolver.lead_sources[0].name == "Direct"

    def test_default_created_only_once(self):
        resolver = EntityResolver([], [])
        ids = {resolver.resolve(EntityKind.SERVICE_TYPE, None) for _ in range(3)}
        assert ids == {"imported-st-default"}
        assert len(resolver.service_types) == 1

    def test_default_name_reused_when_named_later(self):
        """Test a row naming the default later gets the default entity."""
        resolver = EntityResolver([], [])
        default_id = resolver.resolve(EntityKind.LEAD_SOURCE, None)
        assert resolver.resolve(EntityKind.LEAD_SOURCE, "direct") == default_id

    def test_fallback_uses_entity_created_earlier_in_import(self):
        resolver = EntityResolver([], [])
        created = resolver.resolve(EntityKind.SERVICE_TYPE, "Elopement")
        assert resolver.resolve(EntityKind.SERVICE_TYPE, "") == created


class TestCatalogIsolation:
    """Tests that the caller's catalogs are left alone."""

    def test_seed_lists_not_mutated(self, existing_service_types, existing_lead_sources):
        service_types_before = list(existing_service_types)
        lead_sources_before = list(existing_lead_sources)

        resolver = EntityResolver(existing_service_types, existing_lead_sources)
        resolver.resolve(EntityKind.SERVICE_TYPE, "Elopement")
        resolver.resolve(EntityKind.LEAD_SOURCE, "Instagram")

        assert existing_service_types == service_types_before
        assert existing_lead_sources == lead_sources_before
        assert len(resolver.service_types) == 3
        assert len(resolver.lead_sources) == 3

    def test_returned_catalog_is_superset_in_order(self, existing_service_types):
        resolver = EntityResolver(existing_service_types, [])
        resolver.resolve(EntityKind.SERVICE_TYPE, "Elopement")
        assert [st.id for st in resolver.service_types] == ["st-wedding", "st-portrait", "imported-st-2"]
        assert isinstance(resolver.service_types[-1], ServiceType)
