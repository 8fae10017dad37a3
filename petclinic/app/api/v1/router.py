"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import lookups, owners, pets, vets, visits


router = APIRouter()

router.include_router(owners.router, prefix="/owners", tags=["owners"])
router.include_router(pets.router, prefix="/owners/{owner_id}/pets", tags=["pets"])
router.include_router(visits.router, prefix="/owners/{owner_id}/pets/{pet_id}/visits", tags=["visits"])
router.include_router(vets.router, prefix="/vets", tags=["vets"])
router.include_router(lookups.pet_types_router, prefix="/pettypes", tags=["pettypes"])
router.include_router(lookups.specialties_router, prefix="/specialties", tags=["specialties"])
