from typing import Any

from sqlmodel import select

from src.catalog.core.collation import collation_key
from src.catalog.entities.core._repository import EntityRepository
from src.catalog.entities.service.genre.entity import Genre
from src.catalog.entities.service.genre.table import GenreTable


class GenreRepository(EntityRepository[Genre, GenreTable]):
    """Data-access layer for genres."""

    entity_type = Genre
    table_type = GenreTable

    def _to_values(self, entity: Genre) -> dict[str, Any]:
        values = super()._to_values(entity)
        values["name_key"] = collation_key(entity.name)
        return values

    def find_by_name(self, name: str) -> Genre | None:
        """Find a genre whose name matches ignoring case (accents still count)."""
        statement = select(GenreTable).where(GenreTable.name_key == collation_key(name))
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
