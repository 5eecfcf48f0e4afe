"""Response schemas for API endpoints"""
from typing import Any, Dict
from pydantic import BaseModel, Field


class DataResponse(BaseModel):
    """Success envelope"""
    data: Any = Field(..., description="Record, list of records, or {id} for deletes")


class ErrorResponse(BaseModel):
    """Error envelope"""
    error: str = Field(..., description="Error message")


class SeedResponse(BaseModel):
    """Response for POST /api/dev/seed"""
    ok: bool = True
    demo_profile: Dict[str, Any]
    demo_trip: Dict[str, Any]


class HealthResponse(BaseModel):
    status: str = "ok"


ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}
