"""Service type and lead source catalog entities."""

from pydantic import BaseModel, ConfigDict


class ServiceType(BaseModel):
    """A kind of service a business sells (e.g. Wedding, Portrait Session)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str | None = None
    is_custom: bool = False
    tracks_in_funnel: bool = True


class LeadSource(BaseModel):
    """Where an inquiry came from (e.g. Instagram, Vendor Referral)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str | None = None
    is_custom: bool = False
