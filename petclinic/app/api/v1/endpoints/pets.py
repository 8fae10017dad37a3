"""
Pet endpoints for API v1, nested under their owner.

A pet name must be unique among an owner's pets (case insensitive) and
the pet type must already exist.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from petclinic.app.api.deps import get_services
from petclinic.app.models import Owner, Pet, PetType
from petclinic.app.schemas.owner import PetCreate, PetRead, PetUpdate
from petclinic.app.services.registry import ClinicServices


router = APIRouter()


def get_owner_or_404(owner_id: int, services: ClinicServices) -> Owner:
    owner = services.owners.find_by_id(owner_id)
    if owner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Owner not found")
    return owner


def get_pet_or_404(owner_id: int, pet_id: int, services: ClinicServices) -> Pet:
    """Load a pet and check that it belongs to ``owner_id``.

    The owner must still exist; in-memory pets outlive a deleted owner.
    """
    owner = get_owner_or_404(owner_id, services)
    pet = services.pets.find_by_id(pet_id)
    if pet is None or pet.owner is None or pet.owner.id != owner.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
    return pet


def _pet_type(pet_type_id: int, services: ClinicServices) -> PetType:
    pet_type = services.pet_types.find_by_id(pet_type_id)
    if pet_type is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown pet type")
    return pet_type


def _check_unique_name(owner: Owner, name: str, pet: Optional[Pet] = None) -> None:
    existing = owner.get_pet(name, ignore_new=True)
    if existing is not None and existing.id != (pet.id if pet is not None else None):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Pet name already exists")


@router.post("/", response_model=PetRead, status_code=status.HTTP_201_CREATED)
def create_pet(
    owner_id: int,
    pet_in: PetCreate,
    services: ClinicServices = Depends(get_services),
) -> PetRead:
    owner = get_owner_or_404(owner_id, services)
    _check_unique_name(owner, pet_in.name)
    pet = Pet(name=pet_in.name, birth_date=pet_in.birth_date, pet_type=_pet_type(pet_in.pet_type_id, services))
    owner.add_pet(pet)
    services.pets.save(pet)
    return PetRead.model_validate(pet)


@router.get("/{pet_id}", response_model=PetRead)
def get_pet(owner_id: int, pet_id: int, services: ClinicServices = Depends(get_services)) -> PetRead:
    return PetRead.model_validate(get_pet_or_404(owner_id, pet_id, services))


@router.put("/{pet_id}", response_model=PetRead)
def update_pet(
    owner_id: int,
    pet_id: int,
    pet_in: PetUpdate,
    services: ClinicServices = Depends(get_services),
) -> PetRead:
    pet = get_pet_or_404(owner_id, pet_id, services)
    _check_unique_name(pet.owner, pet_in.name, pet)
    # Validate before mutating; the in-memory store holds this same object.
    pet_type = _pet_type(pet_in.pet_type_id, services)
    pet.name = pet_in.name
    pet.birth_date = pet_in.birth_date
    pet.pet_type = pet_type
    services.pets.save(pet)
    return PetRead.model_validate(pet)
