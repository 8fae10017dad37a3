"""Vet repository with its many‑to‑many link to specialties."""

from __future__ import annotations

import sqlite3
from typing import Optional

from ..models import Vet
from .base import SqliteRepository, upsert
from .lookups import load_specialty, store_specialty


def load_vet(cursor: sqlite3.Cursor, vet_id: int) -> Optional[Vet]:
    row = cursor.execute(
        "SELECT id, first_name, last_name FROM vets WHERE id = ?", (vet_id,)
    ).fetchone()
    if not row:
        return None
    vet = Vet(id=row["id"], first_name=row["first_name"], last_name=row["last_name"])
    links = cursor.execute(
        "SELECT specialty_id FROM vet_specialties WHERE vet_id = ? ORDER BY specialty_id",
        (vet_id,),
    ).fetchall()
    for link in links:
        specialty = load_specialty(cursor, link["specialty_id"])
        if specialty is not None:
            vet.add_specialty(specialty)
    return vet


def store_vet(cursor: sqlite3.Cursor, vet: Vet) -> None:
    """Write the vet row and replace its specialty links.

    Specialties that were never saved are inserted first.
    """
    upsert(cursor, "vets", vet, {"first_name": vet.first_name, "last_name": vet.last_name})
    cursor.execute("DELETE FROM vet_specialties WHERE vet_id = ?", (vet.id,))
    for specialty in vet.specialties or ():
        if specialty.id is None:
            store_specialty(cursor, specialty)
        cursor.execute(
            "INSERT OR IGNORE INTO vet_specialties (vet_id, specialty_id) VALUES (?, ?)",
            (vet.id, specialty.id),
        )


class VetRepository(SqliteRepository[Vet]):
    table = "vets"

    def _load(self, cursor, id):
        return load_vet(cursor, id)

    def _store(self, cursor, entity):
        store_vet(cursor, entity)
