"""Pydantic schemas for API request/response validation."""

from funnelbox.schemas.import_schemas import ImportRequest, ImportResultResponse, ReportTypeParam

__all__ = ["ImportRequest", "ImportResultResponse", "ReportTypeParam"]
