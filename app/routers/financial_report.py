"""
Financial Report Router - Financial Report Parser
app/routers/financial_report.py

Upload an annual report PDF and get back the extracted line items as nested
JSON. Extraction runs in a worker thread so PDF decoding does not block the
event loop.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.dependencies import get_financial_report_parser
from app.core.exceptions import DocumentLoadError, InvalidFileException
from app.models.financial_report import ErrorResponse, NoDataResponse
from app.services.financial_report_parser import FinancialReportParser

logger = logging.getLogger(__name__)

router = APIRouter(prefix=get_settings().API_PREFIX, tags=["Financial Report"])


#  Exception Handlers


def _error_body(error_code: str, message: str, details: dict = None) -> dict:
    return {
        "error_code": error_code,
        "message": message,
        "details": details,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body("VALIDATION_ERROR", "Request validation failed"),
        )
    err = errors[0]
    error_type = err.get("type", "")
    field = ".".join(str(l) for l in err.get("loc", []) if l != "body")
    if "missing" in error_type:
        message = f"Field '{field}' is required"
    else:
        message = err.get("msg", "Request validation failed")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(
            "VALIDATION_ERROR",
            message,
            {"field": field, "type": error_type} if field else None,
        ),
    )


async def invalid_file_exception_handler(request: Request, exc: Exception):
    """DocumentLoadError / InvalidFileException -> 400 INVALID_FILE."""
    message = getattr(exc, "message", str(exc))
    details = None
    if getattr(exc, "filename", None):
        details = {"filename": exc.filename}
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("INVALID_FILE", message, details),
    )


#  Endpoints


@router.post(
    "/upload",
    summary="Extract line items from an annual report PDF",
    responses={
        400: {"model": NoDataResponse, "description": "No data extracted or unreadable file"},
        422: {"model": ErrorResponse},
    },
)
async def upload_financial_report(
    file: UploadFile = File(..., description="Annual report PDF"),
    parser: FinancialReportParser = Depends(get_financial_report_parser),
):
    """
    Parse an uploaded annual report.

    **Response:** nested mapping of section -> line item -> value, e.g.
    `{"Assets": {"Current_Assets": {"Cash_and_Cash_Equivalents": 29965.0}}}`.

    - Sections whose anchor text is missing from the document are omitted.
    - Line items not found on a located section's page are `0.0`.
    - 400 `{"error": "No data extracted"}` when no section was located.
    """
    logger.info(f"Uploading file: {file.filename}")

    max_bytes = get_settings().MAX_UPLOAD_BYTES
    too_large = f"File exceeds maximum upload size of {max_bytes} bytes"
    if file.size is not None and file.size > max_bytes:
        raise InvalidFileException(too_large)

    # size is not always reported; never buffer more than one byte past the limit
    data = await file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise InvalidFileException(too_large)

    try:
        parsed_data = await run_in_threadpool(parser.parse_pdf, data, file.filename)
    except DocumentLoadError as e:
        logger.error(f"Error processing file {file.filename}: {e.message}")
        raise

    if not parsed_data:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=NoDataResponse().model_dump(),
        )

    return parsed_data
