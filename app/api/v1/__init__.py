"""API v1 routes."""
from fastapi import APIRouter

from app.api.v1 import health, home

api_router = APIRouter()

# Include all routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(home.router, prefix="/home", tags=["home"])
