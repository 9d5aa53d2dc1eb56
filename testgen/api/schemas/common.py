"""Common API schemas for request/response formatting."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error body.

    {
        "success": false,
        "error": "Failed to fetch repository files",
        "message": "Failed to fetch repository files: Not Found"
    }
    """

    success: bool = Field(default=False, description="Always false for errors")
    error: str = Field(..., description="Short error category")
    message: str | None = Field(default=None, description="Human-readable error details")

    @classmethod
    def fail(cls, error: str, message: str | None = None) -> "ErrorResponse":
        """Create a failure response."""
        return cls(success=False, error=error, message=message)
