from dataclasses import dataclass, field
from typing import Optional, Set

from .base import BaseEntity, Person


@dataclass(eq=False)
class PetType(BaseEntity):
    name: Optional[str] = None


@dataclass(eq=False)
class Specialty(BaseEntity):
    description: Optional[str] = None


@dataclass(eq=False)
class Vet(Person):
    specialties: Set[Specialty] = field(default_factory=set)

    def add_specialty(self, specialty: Specialty) -> None:
        if self.specialties is None:
            self.specialties = set()
        self.specialties.add(specialty)
