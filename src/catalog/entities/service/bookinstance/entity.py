"""Entity: BookInstance (a loanable copy of a book)."""

from datetime import date
from enum import StrEnum
from typing import Any, ClassVar

from pydantic import Field

from src.catalog.entities.core._base import Entity, format_iso_date, format_medium_date


class BookInstanceStatus(StrEnum):
    """Copy status, in display order."""

    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


STATUS_VALUES: tuple[str, ...] = tuple(status.value for status in BookInstanceStatus)
DEFAULT_STATUS = BookInstanceStatus.MAINTENANCE


class BookInstance(Entity):
    """A single copy of a book with its own status and due-back date.

    When ``due_back`` is left empty the store stamps it with the creation
    date.
    """

    kind: ClassVar[str] = "bookinstance"

    book: str = Field(default="", description="Identifier of the book")
    imprint: str = Field(default="", description="Publisher and edition")
    status: BookInstanceStatus = Field(default=DEFAULT_STATUS)
    due_back: date | None = Field(default=None, description="Due-back date")

    @property
    def due_back_formatted(self) -> str:
        return format_medium_date(self.due_back)

    @property
    def due_back_yyyy_mm_dd(self) -> str:
        return format_iso_date(self.due_back)

    def __eq__(self, other: Any) -> bool:
        """Compare copies by business attributes, ignoring timestamps."""
        if not isinstance(other, BookInstance):
            return False

        return (
            self.id == other.id
            and self.book == other.book
            and self.imprint == other.imprint
            and self.status == other.status
            and self.due_back == other.due_back
        )

    def __hash__(self) -> int:
        return hash((self.id, self.book, self.imprint, self.status))
