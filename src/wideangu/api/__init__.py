"""API route aggregation.

All routers registered here get mounted in main.py under /api/v1.
The health router is exported separately because /health lives at the
root, outside the versioned prefix.

Learn: No route requires authentication. Every endpoint is open.
"""

from fastapi import APIRouter

from wideangu.api.auth import router as auth_router
from wideangu.api.bookings import router as bookings_router
from wideangu.api.discover import router as discover_router
from wideangu.api.health import router as health_router
from wideangu.api.professionals import router as professionals_router

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(professionals_router, tags=["professionals"])
api_router.include_router(discover_router, tags=["discover"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(bookings_router, tags=["bookings"])

__all__ = ["api_router", "health_router"]
