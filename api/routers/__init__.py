"""
API Routers Package
"""
from .health import router as health_router
from .twins import router as twins_router

__all__ = [
    'health_router',
    'twins_router',
]
