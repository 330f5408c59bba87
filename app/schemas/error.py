"""
Error response schemas for API documentation.
Mirrors the body produced by ErrorHandlerService so OpenAPI shows the real shape.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Any, Dict


class ErrorDetail(BaseModel):
    field: Optional[str] = Field(None, description="Field path that caused the error")
    message: str = Field(..., description="Human-readable error message")
    type: Optional[str] = Field(None, description="Error type identifier")
    input: Optional[Any] = Field(None, description="Input value that caused the error")


class ErrorResponse(BaseModel):
    code: str = Field(..., description="Error code identifier", examples=["NOT_FOUND"])
    message: str = Field(..., description="Human-readable error message")
    timestamp: str = Field(..., description="Error timestamp in ISO format")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")
    details: Optional[List[ErrorDetail]] = Field(None, description="Per-field validation errors")


class APIErrorResponse(BaseModel):
    """Schema for API error response wrapper."""

    error: ErrorResponse


def _example(code: str, message: str) -> Dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "timestamp": "2025-01-01T00:00:00Z",
            "request_id": "abc12345",
        }
    }


_ERROR_EXAMPLES = {
    400: ("Bad Request", "BAD_REQUEST", "Cannot enquire about your own property"),
    401: ("Unauthorized", "UNAUTHORIZED", "Authentication token required"),
    403: ("Forbidden", "FORBIDDEN", "Insufficient permissions to update this property"),
    404: ("Not Found", "NOT_FOUND", "Property not found with ID: 123e4567-e89b-12d3-a456-426614174000"),
    409: ("Conflict", "CONFLICT", "Property already saved"),
    422: ("Validation Error", "VALIDATION_ERROR", "Request validation failed"),
    500: ("Upstream Error", "UPSTREAM_ERROR", "Upstream store error"),
}

COMMON_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    status_code: {
        "description": description,
        "model": APIErrorResponse,
        "content": {"application/json": {"example": _example(code, message)}},
    }
    for status_code, (description, code, message) in _ERROR_EXAMPLES.items()
}


def get_error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """
    Get error response documentation for specific status codes.

    Args:
        status_codes: HTTP status codes to include

    Returns:
        Dictionary of error responses for OpenAPI documentation
    """
    return {code: COMMON_ERROR_RESPONSES[code] for code in status_codes if code in COMMON_ERROR_RESPONSES}


def get_crud_error_responses() -> Dict[int, Dict[str, Any]]:
    """Error responses shared by authenticated create/update/delete endpoints."""
    return get_error_responses(400, 401, 403, 404, 422, 500)
