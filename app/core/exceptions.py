"""
Custom exception classes for the lab API.

Each exception knows its HTTP status code and renders to the
`{"error": message}` body every error response uses.
"""

from typing import Dict, Any, Optional


class ErrorCodes:
    """Machine-readable error codes, used in log records."""
    MISSING_QUERY_PARAMETER = "MISSING_QUERY_PARAMETER"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class LabAPIException(Exception):
    """
    Base exception class for all application errors.

    Carries the message returned to the caller, an error code for logs,
    and the HTTP status code of the response.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        return {"error": self.message}


class MissingQueryParameterError(LabAPIException):
    """Exception raised when a required query parameter is absent or empty."""

    def __init__(self, parameter: str):
        super().__init__(
            message=f"Query parameter '{parameter}' is required",
            error_code=ErrorCodes.MISSING_QUERY_PARAMETER,
            status_code=400,
            details={"parameter": parameter}
        )
