"""Cross-entity integrity checks run before writes.

All checks read first and act later (check-then-act). Two concurrent
requests can both pass a check, so uniqueness and "no dependents" hold for
sequential use only; the database enforces neither.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from loguru import logger

from src.catalog.core.validation import ValidationResult
from src.catalog.entities import Author, Book, BookInstance, CatalogStore, Genre

P = TypeVar("P")
D = TypeVar("D")


@dataclass
class DeleteCheck(Generic[P, D]):
    """A delete target together with the records blocking its deletion."""

    target: P | None
    dependents: list[D] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.target is not None

    @property
    def allowed(self) -> bool:
        return self.found and not self.dependents


class IntegrityGuard:
    """Uniqueness, dependency and reference checks over a ``CatalogStore``."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    # -- uniqueness ------------------------------------------------------

    def existing_genre(self, name: str) -> Genre | None:
        """Return the genre already holding ``name`` (case-insensitive)."""
        return self._store.genres.find_by_name(name)

    def check_genre_rename(
        self, genre_id: str, name: str, result: ValidationResult
    ) -> None:
        """Flag ``name`` when another genre already uses it."""
        existing = self.existing_genre(name)
        if existing is not None and existing.id != genre_id:
            logger.bind(genre_id=genre_id, clash_id=existing.id).info(
                "Genre rename clashes with an existing name"
            )
            result.add_error("name", "A genre with this name already exists", name)

    # -- dependencies ----------------------------------------------------

    def check_book_delete(self, book_id: str) -> DeleteCheck[Book, BookInstance]:
        book = self._store.books.get(book_id)
        copies = self._store.book_instances.find(book=book_id)
        return DeleteCheck(target=book, dependents=copies)

    def check_genre_delete(self, genre_id: str) -> DeleteCheck[Genre, Book]:
        genre = self._store.genres.get(genre_id)
        books = self._store.books.find_by_genre(genre_id)
        return DeleteCheck(target=genre, dependents=books)

    def check_author_delete(self, author_id: str) -> DeleteCheck[Author, Book]:
        author = self._store.authors.get(author_id)
        books = self._store.books.find(sort=("title",), author=author_id)
        return DeleteCheck(target=author, dependents=books)

    def check_book_instance_delete(
        self, book_instance_id: str
    ) -> DeleteCheck[BookInstance, None]:
        copy = self._store.book_instances.get(book_instance_id)
        return DeleteCheck(target=copy)

    # -- references ------------------------------------------------------

    def check_book_references(self, result: ValidationResult) -> None:
        """Flag an unknown author or genre on a book submission."""
        author_id = result.values.get("author")
        genre_ids = result.values.get("genre") or []
        if author_id and not result.errors_for("author"):
            if self._store.authors.get(author_id) is None:
                result.add_error("author", "Author not found", author_id)

        known = {genre.id for genre in self._store.genres.get_many(genre_ids)}
        for genre_id in genre_ids:
            if genre_id not in known:
                result.add_error("genre", "Genre not found", genre_id)

    def check_book_instance_references(self, result: ValidationResult) -> None:
        """Flag an unknown book on a copy submission."""
        book_id = result.values.get("book")
        if not book_id or result.errors_for("book"):
            return
        if self._store.books.get(book_id) is None:
            result.add_error("book", "Book not found", book_id)
