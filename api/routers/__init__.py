"""
API routers
"""
from .companies import router as companies_router
from .jobs import router as jobs_router

__all__ = ["companies_router", "jobs_router"]
