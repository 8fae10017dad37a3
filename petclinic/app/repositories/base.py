"""
Shared plumbing for the SQLite repositories.

Each repository opens one connection per call through
``core.db.get_cursor``, so every public method runs in its own
transaction: it either commits as a whole or leaves the database
untouched.  Subclasses provide ``_load`` (build an entity from the
database, or ``None``) and ``_store`` (write an entity, assigning its
id when new).
"""

from __future__ import annotations

import datetime
import sqlite3
from typing import Any, Dict, Generic, List, Optional, TypeVar

from ..core.db import get_cursor
from ..models import BaseEntity


E = TypeVar("E", bound=BaseEntity)


class SqliteRepository(Generic[E]):
    table: str = ""

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    def find_all(self) -> List[E]:
        with get_cursor(self.database_url) as cursor:
            ids = [row["id"] for row in cursor.execute(f"SELECT id FROM {self.table} ORDER BY id").fetchall()]
            return [entity for entity in (self._load(cursor, i) for i in ids) if entity is not None]

    def find_by_id(self, id: int) -> Optional[E]:
        with get_cursor(self.database_url) as cursor:
            return self._load(cursor, id)

    def save(self, entity: E) -> E:
        with get_cursor(self.database_url) as cursor:
            self._store(cursor, entity)
        return entity

    def delete(self, entity: E) -> None:
        if entity is None or entity.id is None:
            return
        self.delete_by_id(entity.id)

    def delete_by_id(self, id: int) -> None:
        with get_cursor(self.database_url) as cursor:
            cursor.execute(f"DELETE FROM {self.table} WHERE id = ?", (id,))

    def _load(self, cursor: sqlite3.Cursor, id: int) -> Optional[E]:
        raise NotImplementedError

    def _store(self, cursor: sqlite3.Cursor, entity: E) -> None:
        raise NotImplementedError


def upsert(cursor: sqlite3.Cursor, table: str, entity: BaseEntity, values: Dict[str, Any]) -> None:
    """Insert or update the row for ``entity`` and populate its id.

    An entity carrying an id that is not in the table yet is inserted
    under that id.
    """
    if entity.id is not None:
        assignments = ", ".join(f"{column} = ?" for column in values)
        cursor.execute(
            f"UPDATE {table} SET {assignments} WHERE id = ?",
            (*values.values(), entity.id),
        )
        if cursor.rowcount:
            return
        columns = ["id", *values]
        params = (entity.id, *values.values())
    else:
        columns = list(values)
        params = tuple(values.values())
    placeholders = ", ".join("?" * len(columns))
    cursor.execute(
        f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})",
        params,
    )
    if entity.id is None:
        entity.id = cursor.lastrowid


def to_date(value: Any) -> Optional[datetime.date]:
    """Convert a stored ISO date string back into a ``date``."""
    if value is None or isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(str(value)[:10])


def from_date(value: Optional[datetime.date]) -> Optional[str]:
    return value.isoformat() if value is not None else None
