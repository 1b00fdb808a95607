"""
Common schemas used across the API.
"""
from typing import Any, List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def object_id_string(v: str) -> str:
    """Shared validator body for request fields carrying a document ID."""
    if not ObjectId.is_valid(v):
        raise ValueError("Invalid ID format")
    return v


class CamelModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthCheckResponse(BaseModel):
    """Response schema for health check endpoint."""
    status: str = Field(..., description="Application health status")
    database: str = Field(..., description="Database connection status")
    timestamp: str = Field(..., description="Health check timestamp")
    version: str = Field(..., description="Application version")


class RootResponse(BaseModel):
    """Response schema for root endpoint."""
    message: str = Field(..., description="Welcome message")
    version: str = Field(..., description="API version")
    docs: str = Field(..., description="Documentation URL")
    health: str = Field(..., description="Health check URL")
    status: str = Field(..., description="Application status")
    timestamp: str = Field(..., description="Response timestamp")


class ErrorResponse(BaseModel):
    """Generic error response schema."""
    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human-readable error message")


class ValidationErrorDetail(CamelModel):
    """Individual validation error detail."""
    field: str = Field(..., description="Field that failed validation")
    message: str = Field(..., description="Error message")
    input_value: Any = Field(None, description="Value that caused the error")


class ValidationErrorResponse(ErrorResponse):
    """Response schema for request validation errors (HTTP 400)."""
    details: List[ValidationErrorDetail] = Field(..., description="Detailed validation errors")


class PaginationMeta(CamelModel):
    """Pagination metadata for list responses."""
    total: int = Field(..., description="Total number of items")
    limit: int = Field(..., description="Items per page")
    offset: int = Field(..., description="Number of items skipped")
    has_more: bool = Field(..., description="Whether there are more items")


class SuccessResponse(BaseModel):
    """Generic success response schema."""
    success: bool = Field(True, description="Operation success status")
    message: str = Field(..., description="Success message")


class DocumentResponse(CamelModel):
    """Base for documents exposed with their MongoDB ``_id``."""

    id: str = Field(..., alias="_id", description="Document ID")


class ListEnvelope(CamelModel):
    success: bool = Field(True, description="Operation success status")
    pagination: Optional[PaginationMeta] = Field(None, description="Present on paginated listings")
