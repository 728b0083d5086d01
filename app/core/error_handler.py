import logging
from typing import Dict, Any, Optional

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import ErrorCodes, LabAPIException

logger = logging.getLogger(__name__)


INTERNAL_ERROR_MESSAGE = "Internal Server Error"
VALIDATION_ERROR_MESSAGE = "Invalid request parameters"


class ErrorHandler:
    """Turns exceptions into `{"error": ...}` JSON responses and logs them."""

    def __init__(self):
        self.codes_by_status = {
            400: ErrorCodes.VALIDATION_ERROR,
            404: ErrorCodes.NOT_FOUND,
            405: ErrorCodes.METHOD_NOT_ALLOWED,
        }

    def classify_error(self, error: Exception) -> tuple[str, int]:
        """Return the (error_code, status_code) pair for an exception."""
        if isinstance(error, LabAPIException):
            return error.error_code, error.status_code
        if isinstance(error, RequestValidationError):
            return ErrorCodes.VALIDATION_ERROR, 400
        if isinstance(error, StarletteHTTPException):
            code = self.codes_by_status.get(error.status_code, ErrorCodes.INTERNAL_ERROR)
            return code, error.status_code
        return ErrorCodes.INTERNAL_ERROR, 500

    def get_message(self, error: Exception) -> str:
        if isinstance(error, RequestValidationError):
            return VALIDATION_ERROR_MESSAGE
        if isinstance(error, StarletteHTTPException):
            return str(error.detail)
        return INTERNAL_ERROR_MESSAGE

    def handle_exception(
        self,
        error: Exception,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None
    ) -> JSONResponse:
        """Handle exception and return appropriate JSON response."""
        error_code, default_status = self.classify_error(error)
        if status_code is None:
            status_code = default_status

        extra = {
            "error_code": error_code,
            "request_id": request_id,
            "context": context or {},
        }
        if status_code >= 500:
            logger.error(f"Error handled: {error_code} - {error}", exc_info=error, extra=extra)
        else:
            logger.debug(f"Error handled: {error_code} - {error}", extra=extra)

        if isinstance(error, LabAPIException):
            content = error.to_dict()
        else:
            content = {"error": self.get_message(error)}

        headers = getattr(error, "headers", None)
        return JSONResponse(
            status_code=status_code,
            content=content,
            headers=headers
        )


# Global error handler instance
error_handler = ErrorHandler()
