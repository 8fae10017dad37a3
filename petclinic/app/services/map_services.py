"""
In‑memory storage profile.

``MapStore`` is a keyed store that owns the canonical copy of every
entity saved into it.  It hands out the stored references themselves,
so mutating a returned entity is visible to later reads until the
store is told otherwise.  Identifiers come from a monotonic counter
guarded by the same lock as the mapping, which keeps "assign id,
insert" atomic when FastAPI runs handlers on several worker threads.

``MapService`` implements the ``CrudService`` contract on top of a
store and runs a list of preconditions before every save.  Entity
specific behaviour is composed in the ``*_map_service`` factories
rather than inherited.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Generic, Iterable, List, Optional, Set, TypeVar

from ..models import BaseEntity, Owner, Pet, PetType, Specialty, Vet, Visit
from .validation import Precondition, require_entity, require_persisted_pet_and_owner


E = TypeVar("E", bound=BaseEntity)


class MapStore(Generic[E]):
    """Thread safe mapping from integer id to entity."""

    def __init__(self) -> None:
        self._records: Dict[int, E] = {}
        self._last_id = 0
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def values(self) -> Set[E]:
        with self._lock:
            return set(self._records.values())

    def get(self, key: int) -> Optional[E]:
        with self._lock:
            return self._records.get(key)

    def put(self, entity: E) -> E:
        """Store ``entity``, assigning the next id when it has none.

        An explicit id is stored as given and moves the counter forward
        so that generated ids never land on an occupied key.
        """
        with self._lock:
            if entity.id is None:
                self._last_id += 1
                entity.id = self._last_id
            else:
                self._last_id = max(self._last_id, entity.id)
            self._records[entity.id] = entity
            return entity

    def remove(self, key: int) -> None:
        with self._lock:
            self._records.pop(key, None)

    def remove_entity(self, entity: E) -> None:
        with self._lock:
            for key in [k for k, v in self._records.items() if v is entity]:
                del self._records[key]


class MapService(Generic[E]):
    """``CrudService`` backed by a ``MapStore``."""

    def __init__(
        self,
        name: str,
        preconditions: Iterable[Precondition] = (),
        store: Optional[MapStore[E]] = None,
    ) -> None:
        self.name = name
        self.store: MapStore[E] = store if store is not None else MapStore()
        self.preconditions: List[Precondition] = [require_entity, *preconditions]
        self.logger = logging.getLogger(__name__)

    def find_all(self) -> Set[E]:
        return self.store.values()

    def find_by_id(self, id: int) -> Optional[E]:
        return self.store.get(id)

    def save(self, entity: E) -> E:
        for check in self.preconditions:
            check(entity)
        is_new = entity.is_new()
        saved = self.store.put(entity)
        if is_new:
            self.logger.info("Created %s %s", self.name, saved.id)
        return saved

    def delete(self, entity: E) -> None:
        if entity is None:
            return
        self.store.remove_entity(entity)

    def delete_by_id(self, id: int) -> None:
        self.store.remove(id)


class OwnerMapService(MapService[Owner]):
    """Owner store with the last‑name finders used by the owner search."""

    def __init__(self, store: Optional[MapStore[Owner]] = None) -> None:
        super().__init__("owner", store=store)

    def find_by_last_name(self, last_name: str) -> List[Owner]:
        return sorted(
            (o for o in self.find_all() if o.last_name == last_name),
            key=_by_id,
        )

    def find_by_last_name_like(self, last_name: str) -> List[Owner]:
        # Mirrors SQLite's LIKE, which ignores ASCII case.
        needle = (last_name or "").lower()
        return sorted(
            (o for o in self.find_all() if needle in (o.last_name or "").lower()),
            key=_by_id,
        )


def _by_id(entity: BaseEntity) -> int:
    return entity.id or 0


def owner_map_service() -> OwnerMapService:
    return OwnerMapService()


def pet_map_service() -> MapService[Pet]:
    return MapService("pet")


def visit_map_service() -> MapService[Visit]:
    return MapService("visit", preconditions=[require_persisted_pet_and_owner])


def vet_map_service() -> MapService[Vet]:
    return MapService("vet")


def pet_type_map_service() -> MapService[PetType]:
    return MapService("pet type")


def specialty_map_service() -> MapService[Specialty]:
    return MapService("specialty")
