"""
Router principal de l'API.
"""
from fastapi import APIRouter

from .routes import (
    proxy,
    models,
    health,
)

# Router principal
api_router = APIRouter()

# Inclusion des sous-routers
api_router.include_router(proxy.router, prefix="/api", tags=["proxy"])
api_router.include_router(models.router, prefix="/api/models", tags=["models"])
api_router.include_router(health.router, prefix="", tags=["health"])
