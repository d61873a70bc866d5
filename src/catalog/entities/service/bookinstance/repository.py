from typing import Any

from src.catalog.entities.core._base import utcnow
from src.catalog.entities.core._repository import EntityRepository
from src.catalog.entities.service.bookinstance.entity import BookInstance
from src.catalog.entities.service.bookinstance.table import BookInstanceTable

# Entity field -> table column
_COLUMNS = {"book": "book_id"}


class BookInstanceRepository(EntityRepository[BookInstance, BookInstanceTable]):
    """Data-access layer for book copies."""

    entity_type = BookInstance
    table_type = BookInstanceTable

    def _to_entity(self, row: BookInstanceTable) -> BookInstance:
        return BookInstance(
            id=row.id,
            book=row.book_id,
            imprint=row.imprint,
            status=row.status,
            due_back=row.due_back,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_values(self, entity: BookInstance) -> dict[str, Any]:
        return {
            "book_id": entity.book,
            "imprint": entity.imprint,
            "status": str(entity.status),
            "due_back": entity.due_back,
        }

    def _where(self, statement, filters: dict[str, Any]):
        return super()._where(
            statement,
            {_COLUMNS.get(name, name): str(value) for name, value in filters.items()},
        )

    def create(self, entity: BookInstance) -> BookInstance:
        values = self._to_values(entity)
        created_at = utcnow()
        if values["due_back"] is None:
            values["due_back"] = created_at.date()
        row = BookInstanceTable(created_at=created_at, **values)
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, entity_id: str, entity: BookInstance) -> BookInstance | None:
        if entity.due_back is None:
            existing = self.get(entity_id)
            if existing is None:
                return None
            entity = entity.model_copy(update={"due_back": existing.due_back})
        return super().update(entity_id, entity)
