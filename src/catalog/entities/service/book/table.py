"""Book database table models."""

from sqlmodel import Field, SQLModel

from src.catalog.entities.core._base import EntityTable


class BookGenreLink(SQLModel, table=True):
    """Association between a book and one of its genres."""

    __tablename__ = "book_genre"

    book_id: str = Field(foreign_key="book.id", primary_key=True)
    genre_id: str = Field(foreign_key="genre.id", primary_key=True, index=True)


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    Genres live in ``book_genre``; the repository keeps both in step.
    """

    __tablename__ = "book"

    title: str = Field(index=True)
    summary: str
    isbn: str
    author_id: str = Field(foreign_key="author.id", index=True)
