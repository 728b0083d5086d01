from fastapi import APIRouter
from app.models.health import HealthResponse, PingResponse

router = APIRouter()


@router.get("/ping", response_model=PingResponse, tags=["Health"])
async def ping() -> PingResponse:
    """
    Simple ping endpoint for connectivity testing.
    """
    return PingResponse()


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns the service name, its status and version. The values are fixed;
    no dependency is probed.
    """
    return HealthResponse()
