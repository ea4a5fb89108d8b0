"""Auth API — stub registration.

Learn: POST /auth/register does not create an account. It echoes the
email and user type, attaches a timestamp id, and hands back a fixed
placeholder token. There is no login, no password and no identity
provider behind it.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from wideangu.schemas.requests import RegisterRequest
from wideangu.services.marketplace_service import (
    MarketplaceService,
    get_marketplace_service,
)

router = APIRouter(prefix="/auth")


@router.post("/register")
async def register(
    body: Any = Body(None),
    svc: MarketplaceService = Depends(get_marketplace_service),
):
    return {
        "success": True,
        "data": svc.register_user(RegisterRequest.from_json(body)),
    }
