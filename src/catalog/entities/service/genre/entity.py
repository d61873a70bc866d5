"""Entity: Genre."""

from typing import Any, ClassVar

from pydantic import Field

from src.catalog.entities.core._base import Entity


class Genre(Entity):
    """Genre a book can be tagged with."""

    kind: ClassVar[str] = "genre"

    name: str = Field(default="", description="Genre name (3-100 characters)")

    def __eq__(self, other: Any) -> bool:
        """Compare genres by business attributes, ignoring timestamps."""
        if not isinstance(other, Genre):
            return False

        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.id, self.name))
