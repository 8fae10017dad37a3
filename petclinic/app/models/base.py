from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class BaseEntity:
    """Common identity field; ``id`` is ``None`` until the first save."""

    id: Optional[int] = None

    def is_new(self) -> bool:
        return self.id is None


@dataclass(eq=False)
class Person(BaseEntity):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
