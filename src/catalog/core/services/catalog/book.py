"""Book use cases."""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.services.catalog.outcomes import Outcome, Redirect, Rendered
from src.catalog.core.services.forms import FormStateReconciler
from src.catalog.core.services.integrity import IntegrityGuard
from src.catalog.core.validation import ValidationResult
from src.catalog.core.validation.catalog_rules import validate_book
from src.catalog.entities import Book, BookInstance, CatalogStore
from src.catalog.entities.core._base import collection_url

BOOKS_URL = collection_url("book")


def book_from_values(result: ValidationResult, book_id: str | None = None) -> Book:
    values = result.values
    return Book(
        id=book_id,
        title=values["title"],
        author=values["author"],
        summary=values["summary"],
        isbn=values["isbn"],
        genre=values["genre"],
    )


class BookService:
    def __init__(
        self, store: CatalogStore, guard: IntegrityGuard, forms: FormStateReconciler
    ) -> None:
        self._store = store
        self._guard = guard
        self._forms = forms

    def list_all(self) -> Rendered:
        books = self._store.books.find(sort=("title",))
        authors = self._store.authors.get_many([book.author for book in books])
        by_id = {author.id: author for author in authors}
        return Rendered(
            "book_list",
            {
                "title": "Book List",
                "book_list": [
                    {"book": book, "author": by_id.get(book.author)} for book in books
                ],
            },
        )

    def _load_with_references(self, book_id: str) -> dict[str, Any]:
        book = self._store.books.get(book_id)
        if book is None:
            raise NotFoundError("Book", book_id)
        author = self._store.authors.get(book.author)
        genres = self._store.genres.get_many(book.genre)
        genres = sorted(genres, key=lambda genre: genre.name)
        return {"book": book, "author": author, "genres": genres}

    def detail(self, book_id: str) -> Rendered:
        """Book with author and genres, plus its copies; both reads must succeed."""
        resolved = self._load_with_references(book_id)
        copies = self._store.book_instances.find(book=book_id)
        return Rendered(
            "book_detail",
            {"title": resolved["book"].title, **resolved, "book_instances": copies},
        )

    def create_form(self) -> Rendered:
        return Rendered("book_form", self._forms.book_form("Create Book", Book()))

    def create(self, data: Mapping[str, Any]) -> Outcome:
        result = validate_book(data)
        self._guard.check_book_references(result)
        book = book_from_values(result)

        if not result.is_valid:
            return Rendered(
                "book_form",
                self._forms.book_form("Create Book", book, result.errors),
            )

        created = self._store.books.create(book)
        logger.bind(book_id=created.id).info("Book created")
        return Redirect(created.url)

    def update_form(self, book_id: str) -> Rendered:
        book = self._store.books.get(book_id)
        if book is None:
            raise NotFoundError("Book", book_id)
        return Rendered("book_form", self._forms.book_form("Update Book", book))

    def update(self, book_id: str, data: Mapping[str, Any]) -> Outcome:
        if self._store.books.get(book_id) is None:
            raise NotFoundError("Book", book_id)

        result = validate_book(data)
        self._guard.check_book_references(result)
        book = book_from_values(result, book_id)

        if not result.is_valid:
            return Rendered(
                "book_form",
                self._forms.book_form("Update Book", book, result.errors),
            )

        updated = self._store.books.update(book_id, book)
        if updated is None:
            raise NotFoundError("Book", book_id)
        logger.bind(book_id=book_id).info("Book updated")
        return Redirect(updated.url)

    def _delete_view(self, book: Book, copies: list[BookInstance]) -> Rendered:
        return Rendered(
            "book_delete",
            {"title": "Delete Book", "book": book, "book_instances": copies},
        )

    def delete_form(self, book_id: str) -> Outcome:
        check = self._guard.check_book_delete(book_id)
        if not check.found:
            return Redirect(BOOKS_URL)
        return self._delete_view(check.target, check.dependents)

    def delete(self, book_id: str) -> Outcome:
        check = self._guard.check_book_delete(book_id)
        if not check.found:
            return Redirect(BOOKS_URL)
        if not check.allowed:
            logger.bind(book_id=book_id, copies=len(check.dependents)).info(
                "Book delete refused: copies exist"
            )
            return self._delete_view(check.target, check.dependents)

        self._store.books.delete(book_id)
        logger.bind(book_id=book_id).info("Book deleted")
        return Redirect(BOOKS_URL)
