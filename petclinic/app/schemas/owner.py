"""
Pydantic models for owners, pets and visits.

``OwnerRead`` nests the owner's pets and each pet nests its visits, in
ascending id order.  Pet and visit reads carry the id of the record
they belong to instead of the full back reference.
"""

import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .vet import PetTypeRead


def _sorted_by_id(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=lambda item: (item.id is None, item.id or 0))
    return value


class OwnerBase(BaseModel):
    first_name: str = Field(..., min_length=1, examples=["George"])
    last_name: str = Field(..., min_length=1, examples=["Franklin"])
    address: str = Field(..., min_length=1, examples=["110 W. Liberty St."])
    city: str = Field(..., min_length=1, examples=["Madison"])
    telephone: str = Field(..., pattern=r"^\d{1,10}$", examples=["6085551023"])


class OwnerCreate(OwnerBase):
    """Schema for creating an owner."""
    pass


class OwnerUpdate(OwnerBase):
    """Schema for updating an owner; all fields are replaced."""
    pass


class VisitCreate(BaseModel):
    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    description: str = Field(..., min_length=1, examples=["rabies shot"])


class VisitRead(BaseModel):
    id: int
    date: datetime.date
    description: Optional[str] = None
    pet_id: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def _from_entity(cls, data: Any) -> Any:
        if isinstance(data, dict) or not hasattr(data, "pet"):
            return data
        return {
            "id": data.id,
            "date": data.date,
            "description": data.description,
            "pet_id": data.pet.id if data.pet is not None else None,
        }


class PetCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Leo"])
    birth_date: Optional[datetime.date] = Field(None, examples=["2020-09-07"])
    pet_type_id: int = Field(..., examples=[1])


class PetUpdate(PetCreate):
    """Schema for updating a pet; all fields are replaced."""
    pass


class PetRead(BaseModel):
    id: int
    name: Optional[str] = None
    birth_date: Optional[datetime.date] = None
    pet_type: Optional[PetTypeRead] = None
    owner_id: Optional[int] = None
    visits: List[VisitRead] = []

    @model_validator(mode="before")
    @classmethod
    def _from_entity(cls, data: Any) -> Any:
        if isinstance(data, dict) or not hasattr(data, "owner"):
            return data
        return {
            "id": data.id,
            "name": data.name,
            "birth_date": data.birth_date,
            "pet_type": (
                {"id": data.pet_type.id, "name": data.pet_type.name}
                if data.pet_type is not None
                else None
            ),
            "owner_id": data.owner.id if data.owner is not None else None,
            "visits": _sorted_by_id(data.visits or set()),
        }


class OwnerRead(BaseModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    telephone: Optional[str] = None
    pets: List[PetRead] = []

    model_config = {
        "from_attributes": True,
    }

    @field_validator("pets", mode="before")
    @classmethod
    def _sort_pets(cls, value: Any) -> Any:
        return _sorted_by_id(value)
