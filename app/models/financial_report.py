from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Optional[dict] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class NoDataResponse(BaseModel):
    """Returned when a readable document yields no located sections."""
    error: str = Field(
        default="No data extracted",
        json_schema_extra={"example": "No data extracted"},
    )
