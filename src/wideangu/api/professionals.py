"""Professional type catalog route."""

from fastapi import APIRouter

from wideangu.catalog import PROFESSIONAL_TYPES

router = APIRouter(prefix="/professionals")


@router.get("/types")
async def list_professional_types():
    """All fifteen professional types as a KEY → label map."""
    return {"success": True, "data": dict(PROFESSIONAL_TYPES)}
