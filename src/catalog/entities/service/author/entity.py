"""Entity: Author."""

from datetime import date
from typing import Any, ClassVar

from pydantic import Field

from src.catalog.entities.core._base import Entity, format_iso_date, format_medium_date


class Author(Entity):
    """Author of one or more books."""

    kind: ClassVar[str] = "author"

    first_name: str = Field(default="", description="Given name")
    family_name: str = Field(default="", description="Family name")
    date_of_birth: date | None = Field(default=None, description="Date of birth")
    date_of_death: date | None = Field(default=None, description="Date of death")

    @property
    def name(self) -> str:
        """Full name as ``family, first``; empty when either part is missing."""
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    @property
    def lifespan(self) -> str:
        if self.date_of_birth is None and self.date_of_death is None:
            return ""
        return (
            f"{format_medium_date(self.date_of_birth)} - "
            f"{format_medium_date(self.date_of_death)}"
        ).strip()

    @property
    def date_of_birth_yyyy_mm_dd(self) -> str:
        return format_iso_date(self.date_of_birth)

    @property
    def date_of_death_yyyy_mm_dd(self) -> str:
        return format_iso_date(self.date_of_death)

    def __eq__(self, other: Any) -> bool:
        """Compare authors by business attributes, ignoring timestamps."""
        if not isinstance(other, Author):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.family_name == other.family_name
            and self.date_of_birth == other.date_of_birth
            and self.date_of_death == other.date_of_death
        )

    def __hash__(self) -> int:
        return hash((self.id, self.first_name, self.family_name))
