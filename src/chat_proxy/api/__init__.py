"""
Couche HTTP: router principal et routes par domaine.
"""

from .router import api_router

__all__ = ["api_router"]
