"""
Routes API pour le health check.
"""
from fastapi import APIRouter

from ...config.loader import get_configured_providers

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check: providers dont la clé API est définie (jamais la valeur)."""
    return {
        "status": "ok",
        "providers": get_configured_providers(),
    }
