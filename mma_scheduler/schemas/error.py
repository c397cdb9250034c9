"""Error response schemas for consistent error handling."""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorType(str, Enum):
    """Types of errors that can occur."""

    NOT_FOUND = "not_found"
    DATABASE_ERROR = "database_error"
    INTERNAL_ERROR = "internal_error"


class ErrorResponse(BaseModel):
    """JSON body returned by every API route on failure."""

    error: str = Field(..., description="Human-readable error message")

    model_config = {
        "json_schema_extra": {"example": {"error": "Failed to fetch fighters"}}
    }


class ErrorPage(BaseModel):
    """Context rendered by the HTML error template."""

    error_type: ErrorType = Field(..., description="Category of error")
    title: str = Field(..., description="Page heading")
    message: str = Field(..., description="Explanation shown below the heading")
    status_code: int = Field(..., description="HTTP status code")
    request_id: str | None = Field(None, description="Unique request identifier for tracking")
    back_url: str = Field("/", description="Where the 'back' link points")
    back_label: str = Field("Back to home", description="Text of the 'back' link")
