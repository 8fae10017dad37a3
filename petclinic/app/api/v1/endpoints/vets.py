"""
Vet endpoints for API v1.

Vets are listed with their specialties.  New vets may reference
existing specialties by id; unknown ids are rejected with 400.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from petclinic.app.api.deps import get_services
from petclinic.app.models import Vet
from petclinic.app.schemas.vet import VetCreate, VetRead
from petclinic.app.services.registry import ClinicServices


router = APIRouter()


@router.get("/", response_model=List[VetRead])
def list_vets(services: ClinicServices = Depends(get_services)) -> List[VetRead]:
    vets = sorted(services.vets.find_all(), key=lambda v: v.id or 0)
    return [VetRead.model_validate(vet, from_attributes=True) for vet in vets]


@router.get("/{vet_id}", response_model=VetRead)
def get_vet(vet_id: int, services: ClinicServices = Depends(get_services)) -> VetRead:
    vet = services.vets.find_by_id(vet_id)
    if vet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vet not found")
    return VetRead.model_validate(vet, from_attributes=True)


@router.post("/", response_model=VetRead, status_code=status.HTTP_201_CREATED)
def create_vet(vet_in: VetCreate, services: ClinicServices = Depends(get_services)) -> VetRead:
    vet = Vet(first_name=vet_in.first_name, last_name=vet_in.last_name)
    for specialty_id in vet_in.specialty_ids:
        specialty = services.specialties.find_by_id(specialty_id)
        if specialty is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown specialty {specialty_id}",
            )
        vet.add_specialty(specialty)
    services.vets.save(vet)
    return VetRead.model_validate(vet, from_attributes=True)
