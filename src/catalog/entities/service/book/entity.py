"""Entity: Book."""

from typing import Any, ClassVar

from pydantic import Field

from src.catalog.entities.core._base import Entity


class Book(Entity):
    """Book in the catalog.

    ``author`` and ``genre`` hold identifiers; resolving them to Author and
    Genre records is the caller's job since the store has no joins.
    """

    kind: ClassVar[str] = "book"

    title: str = Field(default="", description="Title")
    summary: str = Field(default="", description="Short summary")
    isbn: str = Field(default="", description="ISBN")
    author: str = Field(default="", description="Identifier of the author")
    genre: list[str] = Field(
        default_factory=list, description="Identifiers of the genres"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.summary == other.summary
            and self.isbn == other.isbn
            and self.author == other.author
            and sorted(self.genre) == sorted(other.genre)
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.isbn,
            self.author,
        ))
