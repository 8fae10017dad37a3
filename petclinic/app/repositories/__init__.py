"""
SQLite repositories used by the relational storage profile.

Each repository exposes ``find_all``, ``find_by_id``, ``save``,
``delete`` and ``delete_by_id``; ``OwnerRepository`` adds the last
name queries.
"""

from .lookups import PetTypeRepository, SpecialtyRepository
from .owners import OwnerRepository, PetRepository, VisitRepository
from .vets import VetRepository

__all__ = [
    "OwnerRepository",
    "PetRepository",
    "PetTypeRepository",
    "SpecialtyRepository",
    "VetRepository",
    "VisitRepository",
]
