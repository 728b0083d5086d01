import logging
import sys
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import api_router
from app.core.config import Settings, settings as default_settings, get_settings
from app.core.cors import apply_cors_headers, cors_middleware
from app.core.error_handler import error_handler
from app.core.exceptions import LabAPIException
from app.core.logging import setup_logging, log_request

logger = logging.getLogger(__name__)

MAX_PORT = 65535


def log_routes(app: FastAPI):
    """Log the route table, one line per method and path."""
    for route in app.routes:
        if isinstance(route, APIRoute):
            for method in sorted(route.methods):
                logger.debug(f"{method:<7} {route.path} --> {route.name}")


def create_app(settings: Settings = default_settings) -> FastAPI:
    """Build the application with its middleware, handlers and routes."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.is_release:
            log_routes(app)
        logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} ready")
        yield
        logger.info(f"{settings.APP_NAME} shutting down")

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # CORS runs inside the request logger so preflight requests are logged too
    app.middleware("http")(cors_middleware)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """
        Access logging with a short request ID for correlation.
        """
        start_time = time.perf_counter()
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"Request [{request_id}] failed after {duration_ms:.2f}ms: {e}",
                extra={"request_id": request_id, "path": request.url.path}
            )
            log_request(
                logger, request_id, request.method, request.url.path,
                500, duration_ms, client_ip
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log_request(
            logger, request_id, request.method, request.url.path,
            response.status_code, duration_ms, client_ip
        )
        return response

    @app.exception_handler(LabAPIException)
    async def lab_api_exception_handler(request: Request, exc: LabAPIException):
        """Handle application errors such as a missing search query."""
        request_id = getattr(request.state, 'request_id', None)
        context = {
            "request_path": request.url.path,
            "request_method": request.method,
            **exc.details
        }
        return error_handler.handle_exception(exc, context=context, request_id=request_id)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle unknown routes and unsupported methods."""
        request_id = getattr(request.state, 'request_id', None)
        context = {
            "request_path": request.url.path,
            "request_method": request.method,
        }
        return error_handler.handle_exception(exc, context=context, request_id=request_id)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        request_id = getattr(request.state, 'request_id', None)
        context = {
            "request_path": request.url.path,
            "validation_errors": exc.errors(),
        }
        return error_handler.handle_exception(exc, context=context, request_id=request_id)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Recover from unexpected exceptions with a bare 500."""
        request_id = getattr(request.state, 'request_id', None)
        context = {
            "request_path": request.url.path,
            "request_method": request.method,
            "client_ip": request.client.host if request.client else "unknown",
        }
        # Sent from outside the CORS middleware, so the headers are added here
        response = error_handler.handle_exception(
            exc,
            status_code=500,
            context=context,
            request_id=request_id
        )
        return apply_cors_headers(response)

    app.include_router(api_router)

    return app


app = create_app()


def run(settings: Optional[Settings] = None):
    """Start the server; exits with status 1 if it cannot listen."""
    settings = settings or get_settings()
    setup_logging(settings)

    try:
        port = int(settings.PORT)
        if not 0 <= port <= MAX_PORT:
            raise ValueError(f"port {port} out of range")
    except ValueError:
        logger.critical(f"Failed to start server: invalid port '{settings.PORT}'")
        sys.exit(1)

    logger.info(f"Server starting on port {settings.PORT}")
    logger.info(f"Health check available at: http://localhost:{settings.PORT}/ping")

    try:
        uvicorn.run(
            create_app(settings),
            host=settings.HOST,
            port=port,
            log_config=None,
            log_level="warning" if settings.is_release else "info",
            access_log=False
        )
    except OSError as e:
        logger.critical(f"Failed to start server: {e}")
        sys.exit(1)
    except SystemExit as e:
        # uvicorn exits on its own when the socket cannot be bound
        if e.code:
            logger.critical(f"Failed to start server: exit status {e.code}")
            sys.exit(1)
        raise


if __name__ == "__main__":
    run()
