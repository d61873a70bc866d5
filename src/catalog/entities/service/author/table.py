"""Author database table model."""

from datetime import date

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors."""

    __tablename__ = "author"

    first_name: str = Field(max_length=100)
    family_name: str = Field(max_length=100, index=True)
    date_of_birth: date | None = None
    date_of_death: date | None = None
