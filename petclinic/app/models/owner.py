"""
Owner aggregate: owners, their pets and the pets' visits.

Relationships are bidirectional.  The ``add_*`` helpers keep the back
references consistent; the storage layer never fixes them up on its
own.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Optional, Set

from .base import BaseEntity, Person
from .vet import PetType


@dataclass(eq=False, repr=False)
class Visit(BaseEntity):
    date: datetime.date = field(default_factory=datetime.date.today)
    description: Optional[str] = None
    pet: Optional[Pet] = None

    def __repr__(self) -> str:
        pet_id = self.pet.id if self.pet is not None else None
        return f"Visit(id={self.id!r}, date={self.date!r}, pet_id={pet_id!r})"


@dataclass(eq=False, repr=False)
class Pet(BaseEntity):
    name: Optional[str] = None
    birth_date: Optional[datetime.date] = None
    pet_type: Optional[PetType] = None
    owner: Optional[Owner] = None
    visits: Set[Visit] = field(default_factory=set)

    def add_visit(self, visit: Visit) -> None:
        """Attach ``visit`` to this pet.

        Only unsaved visits are added to ``visits``; a persisted visit
        is assumed to be in the set already.  The back reference is
        always updated.
        """
        if visit.is_new():
            if self.visits is None:
                self.visits = set()
            self.visits.add(visit)
        visit.pet = self

    def __repr__(self) -> str:
        owner_id = self.owner.id if self.owner is not None else None
        return f"Pet(id={self.id!r}, name={self.name!r}, owner_id={owner_id!r})"


@dataclass(eq=False, repr=False)
class Owner(Person):
    address: Optional[str] = None
    city: Optional[str] = None
    telephone: Optional[str] = None
    pets: Set[Pet] = field(default_factory=set)

    def add_pet(self, pet: Pet) -> None:
        if self.pets is None:
            self.pets = set()
        self.pets.add(pet)
        pet.owner = self

    def get_pet(self, name: str, ignore_new: bool = False) -> Optional[Pet]:
        """Return the pet with the given name (case insensitive), if any."""
        wanted = name.lower()
        for pet in self.pets or ():
            if ignore_new and pet.is_new():
                continue
            if pet.name is not None and pet.name.lower() == wanted:
                return pet
        return None

    def __repr__(self) -> str:
        return (
            f"Owner(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, pets={len(self.pets or ())})"
        )
