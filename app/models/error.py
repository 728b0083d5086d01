"""
Error response model shared by every failing request.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Human-readable error message")

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "Query parameter 'q' is required"
            }
        }
    }
