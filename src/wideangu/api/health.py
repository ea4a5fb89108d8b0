"""Health check endpoint.

Learn: Simple GET endpoint that verifies the server is running and
reports the size of the static catalog. There are no external
dependencies to probe, so the answer is always "ok".
"""

from fastapi import APIRouter

from wideangu.catalog import PROFESSIONAL_TYPES, SERVICE_CATEGORIES
from wideangu.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Report server status and catalog sizes."""
    return {
        "status": "ok",
        "service": settings.service_name,
        "professionals_types": len(PROFESSIONAL_TYPES),
        "categories": len(SERVICE_CATEGORIES),
    }
