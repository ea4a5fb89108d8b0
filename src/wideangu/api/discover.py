"""Discovery API — categories, professional listing, instant capture.

Learn: The GET routes serve the static catalog as-is. Query parameters
are not declared, so anything a client appends (?page=3, ?type=...) is
ignored and the listing always reports total=7, page=1.

POST /discover/instant-capture is a stub: the body is echoed back with
a synthetic request id and a random matched-professionals count.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from wideangu.catalog import (
    DEMO_PROFESSIONALS,
    LISTING_PAGE,
    LISTING_TOTAL,
    SERVICE_CATEGORIES,
)
from wideangu.schemas.requests import InstantCaptureRequest
from wideangu.services.marketplace_service import (
    MarketplaceService,
    get_marketplace_service,
)

router = APIRouter(prefix="/discover")


# ─── Catalog reads ──────────────────────────────────────

@router.get("/categories")
async def list_categories():
    return {
        "success": True,
        "data": [c.model_dump() for c in SERVICE_CATEGORIES],
    }


@router.get("/professionals")
async def list_professionals():
    return {
        "success": True,
        "data": {
            "professionals": [p.model_dump() for p in DEMO_PROFESSIONALS],
            "total": LISTING_TOTAL,
            "page": LISTING_PAGE,
        },
    }


# ─── Instant capture ────────────────────────────────────

@router.post("/instant-capture")
async def instant_capture(
    body: Any = Body(None),
    svc: MarketplaceService = Depends(get_marketplace_service),
):
    """Accept an instant capture request. Nothing is stored or matched."""
    data = svc.request_instant_capture(InstantCaptureRequest.from_json(body))
    return {
        "success": True,
        "message": "Instant capture request received",
        "data": data,
    }
