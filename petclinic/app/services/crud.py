"""
Storage service contracts.

``CrudService`` is the capability set every storage profile provides
for an entity type.  The HTTP layer only depends on these protocols;
which implementation it receives is decided once at startup by
``services.registry``.
"""

from typing import List, Optional, Protocol, Set, TypeVar

from ..models import Owner


T = TypeVar("T")
ID = TypeVar("ID", contravariant=True)


class CrudService(Protocol[T, ID]):
    def find_all(self) -> Set[T]:
        """Return all stored entities as a snapshot set."""
        ...

    def find_by_id(self, id: ID) -> Optional[T]:
        """Return the entity with ``id`` or ``None`` when there is none."""
        ...

    def save(self, entity: T) -> T:
        """Persist ``entity``, assigning an id when it has none."""
        ...

    def delete(self, entity: T) -> None:
        """Remove ``entity`` if it is stored; otherwise do nothing."""
        ...

    def delete_by_id(self, id: ID) -> None:
        """Remove the entity with ``id`` if it is stored; otherwise do nothing."""
        ...


class OwnerService(CrudService[Owner, int], Protocol):
    def find_by_last_name(self, last_name: str) -> List[Owner]:
        ...

    def find_by_last_name_like(self, last_name: str) -> List[Owner]:
        """Owners whose last name contains ``last_name``."""
        ...
