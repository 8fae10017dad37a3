"""
Pydantic models for vets and the lookup entities (pet types,
specialties).
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class PetTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Hamster"])


class PetTypeRead(BaseModel):
    id: int
    name: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class SpecialtyCreate(BaseModel):
    description: str = Field(..., min_length=1, examples=["Radiology"])


class SpecialtyRead(BaseModel):
    id: int
    description: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class VetCreate(BaseModel):
    first_name: str = Field(..., min_length=1, examples=["James"])
    last_name: str = Field(..., min_length=1, examples=["Carter"])
    specialty_ids: List[int] = Field(default_factory=list)


class VetRead(BaseModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    specialties: List[SpecialtyRead] = []

    model_config = {
        "from_attributes": True,
    }

    @field_validator("specialties", mode="before")
    @classmethod
    def _sort_specialties(cls, value: Any) -> Any:
        if isinstance(value, (set, frozenset)):
            return sorted(value, key=lambda s: s.id or 0)
        return value
