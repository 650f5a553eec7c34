"""Lookup-or-create resolution of service types and lead sources by name."""

import logging
from collections.abc import Iterable
from enum import Enum

from funnelbox.models.catalog import LeadSource, ServiceType

logger = logging.getLogger(__name__)


class EntityKind(str, Enum):
    """Catalog an entity name is resolved against."""

    SERVICE_TYPE = "service_type"
    LEAD_SOURCE = "lead_source"


class EntityCatalog:
    """Working copy of one entity catalog for a single import.

    Names are matched case-insensitively; the first entity seen for a name
    keeps it. New ids come from a counter, skipping ids already in the seed,
    so the same file and seed always produce the same ids.
    """

    def __init__(
        self,
        model: type[ServiceType] | type[LeadSource],
        existing: Iterable[ServiceType | LeadSource],
        id_prefix: str,
        default_name: str,
        default_description: str,
        imported_description: str,
    ):
        self._model = model
        self._id_prefix = id_prefix
        self._default_name = default_name
        self._default_description = default_description
        self._imported_description = imported_description

        self.entities: list[ServiceType | LeadSource] = list(existing)
        self._ids_by_name: dict[str, str] = {}
        self._used_ids: set[str] = set()
        for entity in self.entities:
            self._ids_by_name.setdefault(entity.name.strip().lower(), entity.id)
            self._used_ids.add(entity.id)
        self._counter = len(self.entities)

    def __len__(self) -> int:
        return len(self.entities)

    def _next_id(self) -> str:
        while True:
            candidate = f"{self._id_prefix}-{self._counter}"
            self._counter += 1
            if candidate not in self._used_ids:
                return candidate

    def _add(self, entity_id: str, name: str, description: str) -> str:
        entity = self._model(id=entity_id, name=name, description=description, is_custom=True)
        self.entities.append(entity)
        self._used_ids.add(entity_id)
        self._ids_by_name.setdefault(name.lower(), entity_id)
        logger.debug("Created %s '%s' (%s)", self._model.__name__, name, entity_id)
        return entity_id

    def get_or_create(self, name: str) -> str:
        """Return the id of the entity called ``name``, creating it if needed."""
        clean = name.strip()
        existing = self._ids_by_name.get(clean.lower())
        if existing is not None:
            return existing
        return self._add(self._next_id(), clean, self._imported_description)

    def fallback_id(self) -> str:
        """Id to use when a row names no entity.

        The first catalog entry, or a newly created default entity when the
        catalog is empty.
        """
        if self.entities:
            return self.entities[0].id
        default_id = f"{self._id_prefix}-default"
        if default_id in self._used_ids:
            default_id = self._next_id()
        return self._add(default_id, self._default_name, self._default_description)


class EntityResolver:
    """Resolves service type and lead source names to ids for one import.

    The caller's catalogs are copied; the lists passed in are never modified.
    """

    def __init__(
        self,
        existing_service_types: Iterable[ServiceType],
        existing_lead_sources: Iterable[LeadSource],
        source_label: str = "HoneyBook",
        default_service_type: str = "General Service",
        default_lead_source: str = "Direct",
    ):
        imported_description = f"Imported from {source_label}"
        self._catalogs: dict[EntityKind, EntityCatalog] = {
            EntityKind.SERVICE_TYPE: EntityCatalog(
                ServiceType,
                existing_service_types,
                id_prefix="imported-st",
                default_name=default_service_type,
                default_description="Default service type for imported bookings",
                imported_description=imported_description,
            ),
            EntityKind.LEAD_SOURCE: EntityCatalog(
                LeadSource,
                existing_lead_sources,
                id_prefix="imported-ls",
                default_name=default_lead_source,
                default_description="Default lead source for imported bookings",
                imported_description=imported_description,
            ),
        }

    def resolve(self, kind: EntityKind, name: str | None) -> str:
        """Resolve a name to an entity id.

        Args:
            kind: Which catalog to resolve against.
            name: Name from the report; blank or None uses the catalog fallback.

        Returns:
            Id of an existing or newly created entity. Never empty.
        """
        catalog = self._catalogs[kind]
        if name and name.strip():
            return catalog.get_or_create(name)
        return catalog.fallback_id()

    @property
    def service_types(self) -> list[ServiceType]:
        return list(self._catalogs[EntityKind.SERVICE_TYPE].entities)

    @property
    def lead_sources(self) -> list[LeadSource]:
        return list(self._catalogs[EntityKind.LEAD_SOURCE].entities)
