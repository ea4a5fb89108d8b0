"""Bookings API — stub booking creation.

Learn: The body is declared so FastAPI parses it (malformed JSON gets a
422 before the handler runs), but its value is never read. Any valid
payload, or none, gets the same "pending" answer with a fresh
BOOK_<timestamp> id.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from wideangu.services.marketplace_service import (
    MarketplaceService,
    get_marketplace_service,
)

router = APIRouter()


@router.post("/bookings")
async def create_booking(
    body: Any = Body(None),
    svc: MarketplaceService = Depends(get_marketplace_service),
):
    return {"success": True, "data": svc.create_booking()}
