from pydantic import BaseModel


class PingResponse(BaseModel):
    """Ping response model."""
    message: str = "pong"
    status: str = "healthy"


class HealthResponse(BaseModel):
    """Health check response model."""
    service: str = "Go API with Gin"
    status: str = "running"
    version: str = "1.0.0"
