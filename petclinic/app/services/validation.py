"""
Save preconditions composed onto storage services.

A precondition is a callable that receives the entity about to be
saved and raises ``InvalidEntityError`` when it must be rejected.
"""

from typing import Any, Callable, Optional

from ..core.errors import InvalidEntityError
from ..models import Visit


Precondition = Callable[[Any], None]


def require_entity(entity: Optional[Any]) -> None:
    if entity is None:
        raise InvalidEntityError("Entity cannot be None")


def require_persisted_pet_and_owner(visit: Optional[Visit]) -> None:
    """Reject visits whose pet or the pet's owner has not been saved yet."""
    if visit is None:
        raise InvalidEntityError("Visit cannot be None")
    pet = visit.pet
    if pet is None or pet.id is None or pet.owner is None or pet.owner.id is None:
        raise InvalidEntityError("Invalid Visit")
