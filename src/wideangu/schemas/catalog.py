"""Pydantic schemas for the static marketplace catalog.

Learn: Catalog records are frozen models. They are built once when the
catalog module is imported and shared by every request, so nothing is
allowed to mutate them after construction.
"""

from pydantic import BaseModel


class ServiceCategory(BaseModel):
    id: str
    name: str
    icon: str

    model_config = {"frozen": True}


class ProfessionalListing(BaseModel):
    id: int
    name: str
    type: str
    rating: float
    location: str
    specializations: tuple[str, ...]

    model_config = {"frozen": True}
