"""Shared data-access behaviour for the catalog entities.

Repositories work on the synchronous SQLModel session of one request. Each
write commits on its own: one call is one atomic write, and nothing larger is.
"""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import func
from sqlmodel import Session, select

from src.catalog.entities.core._base import Entity, EntityTable, utcnow

E = TypeVar("E", bound=Entity)
T = TypeVar("T", bound=EntityTable)

_MANAGED_FIELDS = {"id", "created_at", "updated_at"}


class EntityRepository(Generic[E, T]):
    """Data-access layer for one entity kind."""

    entity_type: type[E]
    table_type: type[T]

    def __init__(self, session: Session) -> None:
        self._session = session

    # -- mapping -----------------------------------------------------------

    def _to_entity(self, row: T) -> E:
        return self.entity_type.model_validate(row, from_attributes=True)

    def _to_values(self, entity: E) -> dict[str, Any]:
        return entity.model_dump(exclude=_MANAGED_FIELDS)

    def _where(self, statement, filters: dict[str, Any]):
        for name, value in filters.items():
            statement = statement.where(getattr(self.table_type, name) == value)
        return statement

    def _order(self, statement, sort: Sequence[str]):
        for name in sort:
            column = getattr(self.table_type, name.lstrip("-"))
            statement = statement.order_by(
                column.desc() if name.startswith("-") else column.asc()
            )
        return statement

    # -- reads -------------------------------------------------------------

    def get(self, entity_id: str) -> E | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def find(self, sort: Sequence[str] = (), **filters: Any) -> list[E]:
        """Return entities matching equality ``filters`` ordered by ``sort``.

        Sort keys are column names; a leading ``-`` sorts descending.
        """
        statement = self._order(self._where(select(self.table_type), filters), sort)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def count(self, **filters: Any) -> int:
        statement = self._where(
            select(func.count()).select_from(self.table_type), filters
        )
        return self._session.exec(statement).one()

    def get_many(self, entity_ids: Sequence[str]) -> list[E]:
        if not entity_ids:
            return []
        statement = select(self.table_type).where(
            self.table_type.id.in_(list(entity_ids))  # type: ignore[attr-defined]
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    # -- writes ------------------------------------------------------------

    def create(self, entity: E) -> E:
        row = self.table_type(**self._to_values(entity))
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, entity_id: str, entity: E) -> E | None:
        """Replace every field except the identifier; ``None`` if missing."""
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        for name, value in self._to_values(entity).items():
            setattr(row, name, value)
        row.updated_at = utcnow()
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity_id: str) -> bool:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.commit()
        return True
