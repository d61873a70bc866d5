from collections.abc import Sequence
from typing import Any

from sqlmodel import select

from src.catalog.entities.core._base import utcnow
from src.catalog.entities.core._repository import EntityRepository
from src.catalog.entities.service.book.entity import Book
from src.catalog.entities.service.book.table import BookGenreLink, BookTable

# Entity field -> table column
_COLUMNS = {"author": "author_id"}


class BookRepository(EntityRepository[Book, BookTable]):
    """Data-access layer for books and their genre links."""

    entity_type = Book
    table_type = BookTable

    def _genre_ids(self, book_id: str) -> list[str]:
        statement = select(BookGenreLink.genre_id).where(BookGenreLink.book_id == book_id)
        return list(self._session.exec(statement).all())

    def _to_entity(self, row: BookTable) -> Book:
        return Book(
            id=row.id,
            title=row.title,
            summary=row.summary,
            isbn=row.isbn,
            author=row.author_id,
            genre=self._genre_ids(row.id),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_values(self, entity: Book) -> dict[str, Any]:
        return {
            "title": entity.title,
            "summary": entity.summary,
            "isbn": entity.isbn,
            "author_id": entity.author,
        }

    def _where(self, statement, filters: dict[str, Any]):
        return super()._where(
            statement, {_COLUMNS.get(name, name): value for name, value in filters.items()}
        )

    def _unlink_genres(self, book_id: str) -> None:
        statement = select(BookGenreLink).where(BookGenreLink.book_id == book_id)
        for link in self._session.exec(statement).all():
            self._session.delete(link)
        self._session.flush()

    def _link_genres(self, book_id: str, genre_ids: Sequence[str]) -> None:
        # dict.fromkeys keeps submission order and drops repeats
        for genre_id in dict.fromkeys(genre_ids):
            self._session.add(BookGenreLink(book_id=book_id, genre_id=genre_id))

    def find_by_genre(self, genre_id: str, sort: Sequence[str] = ("title",)) -> list[Book]:
        statement = self._order(
            select(BookTable)
            .join(BookGenreLink, BookGenreLink.book_id == BookTable.id)
            .where(BookGenreLink.genre_id == genre_id),
            sort,
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def create(self, entity: Book) -> Book:
        row = BookTable(**self._to_values(entity))
        self._session.add(row)
        self._session.flush()
        self._link_genres(row.id, entity.genre)
        self._session.commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, entity_id: str, entity: Book) -> Book | None:
        row = self._session.get(BookTable, entity_id)
        if row is None:
            return None
        for name, value in self._to_values(entity).items():
            setattr(row, name, value)
        row.updated_at = utcnow()
        self._session.add(row)
        self._unlink_genres(entity_id)
        self._link_genres(entity_id, entity.genre)
        self._session.commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity_id: str) -> bool:
        row = self._session.get(BookTable, entity_id)
        if row is None:
            return False
        self._unlink_genres(entity_id)
        self._session.delete(row)
        self._session.commit()
        return True
