"""Domain entity for grid stations."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class Station:
    """A physical grid monitoring / forecast point."""

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    location: str = ""
