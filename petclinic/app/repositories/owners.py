"""
Repositories for the owner aggregate (owners, pets, visits).

Rows are turned into entities with all references wired both ways: an
owner is loaded together with its pets, each pet with its type and
visits.  Pets and visits are always loaded through their owner so that
``pet.owner.pets`` contains the very pet object returned to the caller.

Saving cascades downwards.  An owner save writes its pets, and a pet
save writes its visits, all in the caller's transaction.
"""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from ..core.db import get_cursor
from ..models import Owner, Pet, Visit
from .base import SqliteRepository, from_date, to_date, upsert
from .lookups import load_pet_type, store_pet_type


OWNER_COLUMNS = "id, first_name, last_name, address, city, telephone"


def _owner_from_row(cursor: sqlite3.Cursor, row: sqlite3.Row) -> Owner:
    owner = Owner(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        address=row["address"],
        city=row["city"],
        telephone=row["telephone"],
    )
    pet_rows = cursor.execute(
        "SELECT * FROM pets WHERE owner_id = ? ORDER BY id", (owner.id,)
    ).fetchall()
    for pet_row in pet_rows:
        owner.add_pet(_pet_from_row(cursor, pet_row))
    return owner


def _pet_from_row(cursor: sqlite3.Cursor, row: sqlite3.Row) -> Pet:
    pet = Pet(
        id=row["id"],
        name=row["name"],
        birth_date=to_date(row["birth_date"]),
        pet_type=load_pet_type(cursor, row["type_id"]),
    )
    visit_rows = cursor.execute(
        "SELECT * FROM visits WHERE pet_id = ? ORDER BY id", (pet.id,)
    ).fetchall()
    for visit_row in visit_rows:
        pet.visits.add(
            Visit(
                id=visit_row["id"],
                date=to_date(visit_row["date"]),
                description=visit_row["description"],
                pet=pet,
            )
        )
    return pet


def load_owner(cursor: sqlite3.Cursor, owner_id: int) -> Optional[Owner]:
    row = cursor.execute(
        f"SELECT {OWNER_COLUMNS} FROM owners WHERE id = ?", (owner_id,)
    ).fetchone()
    if not row:
        return None
    return _owner_from_row(cursor, row)


def load_pet(cursor: sqlite3.Cursor, pet_id: int) -> Optional[Pet]:
    row = cursor.execute("SELECT * FROM pets WHERE id = ?", (pet_id,)).fetchone()
    if not row:
        return None
    if row["owner_id"] is not None:
        owner = load_owner(cursor, row["owner_id"])
        if owner is not None:
            for pet in owner.pets:
                if pet.id == pet_id:
                    return pet
    return _pet_from_row(cursor, row)


def load_visit(cursor: sqlite3.Cursor, visit_id: int) -> Optional[Visit]:
    row = cursor.execute("SELECT pet_id FROM visits WHERE id = ?", (visit_id,)).fetchone()
    if not row:
        return None
    pet = load_pet(cursor, row["pet_id"])
    if pet is None:
        return None
    for visit in pet.visits:
        if visit.id == visit_id:
            return visit
    return None


def store_owner(cursor: sqlite3.Cursor, owner: Owner) -> None:
    upsert(
        cursor,
        "owners",
        owner,
        {
            "first_name": owner.first_name,
            "last_name": owner.last_name,
            "address": owner.address,
            "city": owner.city,
            "telephone": owner.telephone,
        },
    )
    for pet in list(owner.pets or ()):
        pet.owner = owner
        store_pet(cursor, pet)


def store_pet(cursor: sqlite3.Cursor, pet: Pet) -> None:
    if pet.pet_type is not None and pet.pet_type.id is None:
        store_pet_type(cursor, pet.pet_type)
    upsert(
        cursor,
        "pets",
        pet,
        {
            "name": pet.name,
            "birth_date": from_date(pet.birth_date),
            "type_id": pet.pet_type.id if pet.pet_type is not None else None,
            "owner_id": pet.owner.id if pet.owner is not None else None,
        },
    )
    for visit in list(pet.visits or ()):
        visit.pet = pet
        store_visit(cursor, visit)


def store_visit(cursor: sqlite3.Cursor, visit: Visit) -> None:
    # A visit without a saved pet violates ``pet_id NOT NULL`` and the
    # resulting sqlite3.IntegrityError is left to the caller.
    upsert(
        cursor,
        "visits",
        visit,
        {
            "date": from_date(visit.date),
            "description": visit.description,
            "pet_id": visit.pet.id if visit.pet is not None else None,
        },
    )


class OwnerRepository(SqliteRepository[Owner]):
    table = "owners"

    def find_by_last_name(self, last_name: str) -> List[Owner]:
        return self._find_where("last_name = ?", last_name)

    def find_by_last_name_is_like(self, pattern: str) -> List[Owner]:
        return self._find_where("last_name LIKE ? ESCAPE '\\'", pattern)

    def _find_where(self, clause: str, value: str) -> List[Owner]:
        with get_cursor(self.database_url) as cursor:
            rows = cursor.execute(
                f"SELECT {OWNER_COLUMNS} FROM owners WHERE {clause} ORDER BY id", (value,)
            ).fetchall()
            return [_owner_from_row(cursor, row) for row in rows]

    def _load(self, cursor, id):
        return load_owner(cursor, id)

    def _store(self, cursor, entity):
        store_owner(cursor, entity)


class PetRepository(SqliteRepository[Pet]):
    table = "pets"

    def _load(self, cursor, id):
        return load_pet(cursor, id)

    def _store(self, cursor, entity):
        store_pet(cursor, entity)


class VisitRepository(SqliteRepository[Visit]):
    table = "visits"

    def _load(self, cursor, id):
        return load_visit(cursor, id)

    def _store(self, cursor, entity):
        store_visit(cursor, entity)
