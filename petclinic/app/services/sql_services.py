"""
Relational storage profile (``springdatajpa``).

These services satisfy the same ``CrudService`` contract as the
in‑memory ones by delegating to the SQLite repositories.  Errors from
the database are not caught here; they propagate to the caller as
``sqlite3.Error``.
"""

from __future__ import annotations

import logging
import re
from typing import Generic, List, Optional, Set, TypeVar

from ..models import BaseEntity, Owner
from ..repositories import OwnerRepository
from ..repositories.base import SqliteRepository
from .validation import require_entity


E = TypeVar("E", bound=BaseEntity)
_LIKE_SPECIAL = re.compile(r"[\\%_]")


class RepositoryService(Generic[E]):
    """``CrudService`` delegating to a ``SqliteRepository``."""

    def __init__(self, name: str, repository: SqliteRepository[E]) -> None:
        self.name = name
        self.repository = repository

    def find_all(self) -> Set[E]:
        return set(self.repository.find_all())

    def find_by_id(self, id: int) -> Optional[E]:
        return self.repository.find_by_id(id)

    def save(self, entity: E) -> E:
        require_entity(entity)
        is_new = entity.is_new()
        saved = self.repository.save(entity)
        if is_new:
            logging.getLogger(__name__).info("Created %s %s", self.name, saved.id)
        return saved

    def delete(self, entity: E) -> None:
        self.repository.delete(entity)

    def delete_by_id(self, id: int) -> None:
        self.repository.delete_by_id(id)


class OwnerRepositoryService(RepositoryService[Owner]):
    """Owner service; ``save`` writes the owner, its pets and visits atomically."""

    repository: OwnerRepository

    def __init__(self, repository: OwnerRepository) -> None:
        super().__init__("owner", repository)

    def find_by_last_name(self, last_name: str) -> List[Owner]:
        return self.repository.find_by_last_name(last_name)

    def find_by_last_name_like(self, last_name: str) -> List[Owner]:
        """Substring match; ``%`` and ``_`` in ``last_name`` are literal."""
        escaped = _LIKE_SPECIAL.sub(r"\\\g<0>", last_name or "")
        return self.repository.find_by_last_name_is_like(f"%{escaped}%")
