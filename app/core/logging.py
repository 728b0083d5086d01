"""
Logging setup for the lab API.

Two modes, selected by SERVER_MODE:
- verbose (default): DEBUG level with timestamps, logger name and source line
- release: INFO level with a terse one-line format

LOG_FORMAT=json swaps either format for one JSON object per line.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from app.core.config import Settings


VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s"
TERSE_FORMAT = "%(levelname)s %(message)s"

LOG_CONTEXT_FIELDS = (
    "request_id", "method", "path", "status_code", "duration_ms", "client_ip", "error_code",
)


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured logging with JSON output."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Request and error context, when attached via `extra`
        for key in LOG_CONTEXT_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def build_formatter(settings: Settings) -> logging.Formatter:
    if settings.LOG_FORMAT.lower() == "json":
        return StructuredFormatter()
    if settings.is_release:
        return logging.Formatter(TERSE_FORMAT)
    return logging.Formatter(VERBOSE_FORMAT)


def setup_logging(settings: Settings, stream: Optional[object] = None) -> logging.Logger:
    """Configure the root logger for the selected mode and return it."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if settings.is_release else logging.DEBUG)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(build_formatter(settings))
    root_logger.addHandler(console_handler)

    return root_logger


def log_request(logger: logging.Logger, request_id: str, method: str, path: str,
                status_code: int, duration_ms: float, client_ip: str = "unknown"):
    """Log a completed request; client and server errors go out as warnings."""
    level = logging.INFO if status_code < 400 else logging.WARNING
    logger.log(
        level,
        f"[{request_id}] {method} {path} - {status_code} ({duration_ms:.2f}ms)",
        extra={
            "request_id": request_id,
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 2),
            "client_ip": client_ip,
        }
    )
