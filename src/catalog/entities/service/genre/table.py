"""Genre database table model."""

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class GenreTable(EntityTable, table=True):
    """Database persistence model for genres.

    ``name_key`` holds the collation key of ``name`` so case-insensitive
    lookups are a plain indexed equality. It is not unique: uniqueness is
    checked before insert, not enforced by the database.
    """

    __tablename__ = "genre"

    name: str = Field(max_length=100)
    name_key: str = Field(index=True)
