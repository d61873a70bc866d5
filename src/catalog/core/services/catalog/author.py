"""Author use cases."""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.services.catalog.outcomes import Outcome, Redirect, Rendered
from src.catalog.core.services.forms import FormStateReconciler
from src.catalog.core.services.integrity import IntegrityGuard
from src.catalog.core.validation import ValidationResult
from src.catalog.core.validation.catalog_rules import validate_author
from src.catalog.entities import Author, Book, CatalogStore
from src.catalog.entities.core._base import collection_url

AUTHORS_URL = collection_url("author")


def author_from_values(result: ValidationResult, author_id: str | None = None) -> Author:
    """Build an author from sanitized input; unparsable dates become empty."""
    values = result.values

    def _date(name: str):
        return None if result.errors_for(name) else values[name]

    return Author(
        id=author_id,
        first_name=values["first_name"],
        family_name=values["family_name"],
        date_of_birth=_date("date_of_birth"),
        date_of_death=_date("date_of_death"),
    )


class AuthorService:
    def __init__(
        self, store: CatalogStore, guard: IntegrityGuard, forms: FormStateReconciler
    ) -> None:
        self._store = store
        self._guard = guard
        self._forms = forms

    def list_all(self) -> Rendered:
        authors = self._store.authors.find(sort=("family_name", "first_name"))
        return Rendered("author_list", {"title": "Author List", "author_list": authors})

    def detail(self, author_id: str) -> Rendered:
        author = self._store.authors.get(author_id)
        books = self._store.books.find(sort=("title",), author=author_id)
        if author is None:
            raise NotFoundError("Author", author_id)
        return Rendered(
            "author_detail",
            {"title": "Author Detail", "author": author, "author_books": books},
        )

    def create_form(self) -> Rendered:
        return Rendered("author_form", self._forms.author_form("Create Author", Author()))

    def create(self, data: Mapping[str, Any]) -> Outcome:
        result = validate_author(data)
        author = author_from_values(result)

        if not result.is_valid:
            return Rendered(
                "author_form",
                self._forms.author_form("Create Author", author, result.errors),
            )

        created = self._store.authors.create(author)
        logger.bind(author_id=created.id).info("Author created")
        return Redirect(created.url)

    def update_form(self, author_id: str) -> Rendered:
        author = self._store.authors.get(author_id)
        if author is None:
            raise NotFoundError("Author", author_id)
        return Rendered("author_form", self._forms.author_form("Update Author", author))

    def update(self, author_id: str, data: Mapping[str, Any]) -> Outcome:
        if self._store.authors.get(author_id) is None:
            raise NotFoundError("Author", author_id)

        result = validate_author(data)
        author = author_from_values(result, author_id)

        if not result.is_valid:
            return Rendered(
                "author_form",
                self._forms.author_form("Update Author", author, result.errors),
            )

        updated = self._store.authors.update(author_id, author)
        if updated is None:
            raise NotFoundError("Author", author_id)
        logger.bind(author_id=author_id).info("Author updated")
        return Redirect(updated.url)

    def _delete_view(self, author: Author, books: list[Book]) -> Rendered:
        return Rendered(
            "author_delete",
            {"title": "Delete Author", "author": author, "author_books": books},
        )

    def delete_form(self, author_id: str) -> Outcome:
        check = self._guard.check_author_delete(author_id)
        if not check.found:
            return Redirect(AUTHORS_URL)
        return self._delete_view(check.target, check.dependents)

    def delete(self, author_id: str) -> Outcome:
        check = self._guard.check_author_delete(author_id)
        if not check.found:
            return Redirect(AUTHORS_URL)
        if not check.allowed:
            logger.bind(author_id=author_id, books=len(check.dependents)).info(
                "Author delete refused: books exist"
            )
            return self._delete_view(check.target, check.dependents)

        self._store.authors.delete(author_id)
        logger.bind(author_id=author_id).info("Author deleted")
        return Redirect(AUTHORS_URL)
