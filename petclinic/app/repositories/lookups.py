"""Repositories for the lookup tables: pet types and vet specialties."""

from __future__ import annotations

import sqlite3
from typing import Optional

from ..models import PetType, Specialty
from .base import SqliteRepository, upsert


def load_pet_type(cursor: sqlite3.Cursor, type_id: Optional[int]) -> Optional[PetType]:
    if type_id is None:
        return None
    row = cursor.execute("SELECT id, name FROM pet_types WHERE id = ?", (type_id,)).fetchone()
    if not row:
        return None
    return PetType(id=row["id"], name=row["name"])


def store_pet_type(cursor: sqlite3.Cursor, pet_type: PetType) -> None:
    upsert(cursor, "pet_types", pet_type, {"name": pet_type.name})


def load_specialty(cursor: sqlite3.Cursor, specialty_id: int) -> Optional[Specialty]:
    row = cursor.execute(
        "SELECT id, description FROM specialties WHERE id = ?", (specialty_id,)
    ).fetchone()
    if not row:
        return None
    return Specialty(id=row["id"], description=row["description"])


def store_specialty(cursor: sqlite3.Cursor, specialty: Specialty) -> None:
    upsert(cursor, "specialties", specialty, {"description": specialty.description})


class PetTypeRepository(SqliteRepository[PetType]):
    table = "pet_types"

    def _load(self, cursor, id):
        return load_pet_type(cursor, id)

    def _store(self, cursor, entity):
        store_pet_type(cursor, entity)


class SpecialtyRepository(SqliteRepository[Specialty]):
    table = "specialties"

    def _load(self, cursor, id):
        return load_specialty(cursor, id)

    def _store(self, cursor, entity):
        store_specialty(cursor, entity)
