"""
Domain entities of the pet clinic.

Entities are plain mutable dataclasses shared by both storage
profiles.  They compare and hash by identity so that they can be kept
in sets while their fields (including ``id``) change on save.
"""

from .base import BaseEntity, Person
from .owner import Owner, Pet, Visit
from .vet import PetType, Specialty, Vet

__all__ = [
    "BaseEntity",
    "Person",
    "Owner",
    "Pet",
    "Visit",
    "PetType",
    "Specialty",
    "Vet",
]
