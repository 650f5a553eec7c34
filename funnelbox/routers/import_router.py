"""Import endpoints for CRM report files."""

import logging

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from funnelbox.config import settings
from funnelbox.schemas.import_schemas import ImportRequest, ImportResultResponse, ReportTypeParam
from funnelbox.services.import_service import (
    ALLOWED_EXTENSIONS,
    UnsupportedFileType,
    get_file_extension,
    import_report,
    import_table,
    load_table,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _import_options() -> dict:
    """Import keyword options taken from settings."""
    return {
        "max_rows": settings.max_import_rows,
        "source_label": settings.import_source_label,
        "default_service_type": settings.default_service_type,
        "default_lead_source": settings.default_lead_source,
    }


@router.post("/{report_type}", response_model=ImportResultResponse)
async def import_csv_text(report_type: ReportTypeParam, request: ImportRequest) -> ImportResultResponse:
    """Import CSV text against the caller's catalogs.

    Nothing is stored; the caller persists the returned catalogs, bookings
    and funnel months.
    """
    result = import_report(
        request.csv_text,
        request.existing_service_types,
        request.existing_lead_sources,
        owner_id=request.owner_id,
        report_type=report_type.to_report_type(),
        generate_bookings=request.generate_bookings,
        **_import_options(),
    )
    return ImportResultResponse.from_result(result)


@router.post("/{report_type}/upload", response_model=ImportResultResponse)
async def import_upload(
    report_type: ReportTypeParam,
    file: UploadFile = File(..., description="CSV or XLSX report export"),
    owner_id: str | None = Form(None),
) -> ImportResultResponse:
    """Import an uploaded report file against empty catalogs."""
    ext = get_file_extension(file.filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type '.{ext}'. Allowed: CSV, XLSX",
        )

    # Read in chunks to avoid unbounded memory for oversized files
    max_size = settings.max_upload_size_bytes
    chunks: list[bytes] = []
    total_size = 0
    while True:
        chunk = await file.read(64 * 1024)
        if not chunk:
            break
        total_size += len(chunk)
        if total_size > max_size:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File exceeds maximum size of {settings.max_upload_size_mb} MB",
            )
        chunks.append(chunk)

    try:
        table = load_table(file.filename, b"".join(chunks))
    except UnsupportedFileType as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info("Importing upload '%s' (%d bytes)", file.filename, total_size)
    result = import_table(
        table,
        owner_id=owner_id,
        report_type=report_type.to_report_type(),
        **_import_options(),
    )
    return ImportResultResponse.from_result(result)
