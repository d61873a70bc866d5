"""BookInstance database table model."""

from datetime import date

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class BookInstanceTable(EntityTable, table=True):
    """Database persistence model for book copies."""

    __tablename__ = "bookinstance"

    book_id: str = Field(foreign_key="book.id", index=True)
    imprint: str
    status: str = Field(default="Maintenance", index=True)
    due_back: date
