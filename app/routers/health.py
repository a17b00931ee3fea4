"""
Health Check Router - Financial Report Parser
app/routers/health.py

Returns health status of the service and its extraction dependencies.
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone

from app.config import get_settings
from app.extraction.annual_report_schema import ANNUAL_REPORT_SCHEMA
from app.extraction.schema import validate_schema

router = APIRouter(tags=["Health"])



#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]



#  Dependency Health Checks


def check_pdfplumber() -> str:
    """Check the PDF text extraction library is importable."""
    try:
        import pdfplumber

        return f"healthy (pdfplumber {getattr(pdfplumber, '__version__', 'unknown')})"
    except ImportError:
        return "unhealthy: pdfplumber not installed"


def check_schema() -> str:
    """Check the bundled label schema is well formed."""
    try:
        validate_schema(ANNUAL_REPORT_SCHEMA)
    except ValueError as e:
        return f"unhealthy: {e}"
    return f"healthy ({len(ANNUAL_REPORT_SCHEMA)} sections)"



#  Main Health Check Route


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "All dependencies healthy"},
        503: {"description": "One or more dependencies unhealthy"},
    },
    summary="Health check",
)
async def health_check():
    """Check health of all dependencies."""
    dependencies = {
        "pdfplumber": check_pdfplumber(),
        "extraction_schema": check_schema(),
    }

    all_healthy = all(v.startswith("healthy") for v in dependencies.values())

    response = HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=get_settings().APP_VERSION,
        dependencies=dependencies,
    )

    if all_healthy:
        return response
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=response.model_dump(mode="json"),
    )
