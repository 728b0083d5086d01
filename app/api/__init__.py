from fastapi import APIRouter
from app.api.endpoints import health, users, search

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router)
api_router.include_router(users.router)
api_router.include_router(search.router)
