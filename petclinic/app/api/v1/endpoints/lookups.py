"""
Lookup endpoints for API v1: pet types and vet specialties.

Both are simple named records used to classify pets and vets.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petclinic.app.api.deps import get_services
from petclinic.app.models import PetType, Specialty
from petclinic.app.schemas.vet import PetTypeCreate, PetTypeRead, SpecialtyCreate, SpecialtyRead
from petclinic.app.services.registry import ClinicServices


pet_types_router = APIRouter()
specialties_router = APIRouter()


@pet_types_router.get("/", response_model=List[PetTypeRead])
def list_pet_types(services: ClinicServices = Depends(get_services)) -> List[PetTypeRead]:
    pet_types = sorted(services.pet_types.find_all(), key=lambda t: t.id or 0)
    return [PetTypeRead.model_validate(t, from_attributes=True) for t in pet_types]


@pet_types_router.post("/", response_model=PetTypeRead, status_code=status.HTTP_201_CREATED)
def create_pet_type(data: PetTypeCreate, services: ClinicServices = Depends(get_services)) -> PetTypeRead:
    pet_type = services.pet_types.save(PetType(name=data.name))
    return PetTypeRead.model_validate(pet_type, from_attributes=True)


@specialties_router.get("/", response_model=List[SpecialtyRead])
def list_specialties(services: ClinicServices = Depends(get_services)) -> List[SpecialtyRead]:
    specialties = sorted(services.specialties.find_all(), key=lambda s: s.id or 0)
    return [SpecialtyRead.model_validate(s, from_attributes=True) for s in specialties]


@specialties_router.post("/", response_model=SpecialtyRead, status_code=status.HTTP_201_CREATED)
def create_specialty(data: SpecialtyCreate, services: ClinicServices = Depends(get_services)) -> SpecialtyRead:
    specialty = services.specialties.save(Specialty(description=data.description))
    return SpecialtyRead.model_validate(specialty, from_attributes=True)
