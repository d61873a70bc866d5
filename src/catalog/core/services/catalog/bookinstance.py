"""BookInstance (copy) use cases."""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.services.catalog.outcomes import Outcome, Redirect, Rendered
from src.catalog.core.services.forms import FormStateReconciler
from src.catalog.core.services.integrity import IntegrityGuard
from src.catalog.core.validation import ValidationResult
from src.catalog.core.validation.catalog_rules import validate_book_instance
from src.catalog.entities import BookInstance, CatalogStore
from src.catalog.entities.core._base import collection_url
from src.catalog.entities.service.bookinstance.entity import DEFAULT_STATUS

BOOK_INSTANCES_URL = collection_url("bookinstance")


def book_instance_from_values(
    result: ValidationResult, book_instance_id: str | None = None
) -> BookInstance:
    """Build a copy from sanitized input.

    A rejected status falls back to the default and a rejected date to empty,
    so the form can still be redisplayed.
    """
    values = result.values
    status = DEFAULT_STATUS if result.errors_for("status") else values["status"]
    due_back = None if result.errors_for("due_back") else values["due_back"]
    return BookInstance(
        id=book_instance_id,
        book=values["book"],
        imprint=values["imprint"],
        status=status,
        due_back=due_back,
    )


class BookInstanceService:
    def __init__(
        self, store: CatalogStore, guard: IntegrityGuard, forms: FormStateReconciler
    ) -> None:
        self._store = store
        self._guard = guard
        self._forms = forms

    def list_all(self) -> Rendered:
        copies = self._store.book_instances.find()
        books = self._store.books.get_many(list({copy.book for copy in copies}))
        by_id = {book.id: book for book in books}
        return Rendered(
            "bookinstance_list",
            {
                "title": "Book Instance List",
                "bookinstance_list": [
                    {"bookinstance": copy, "book": by_id.get(copy.book)}
                    for copy in copies
                ],
            },
        )

    def detail(self, book_instance_id: str) -> Rendered:
        copy = self._store.book_instances.get(book_instance_id)
        if copy is None:
            raise NotFoundError("Book copy", book_instance_id)
        book = self._store.books.get(copy.book)
        title = f"Copy: {book.title}" if book else "Copy"
        return Rendered(
            "bookinstance_detail",
            {"title": title, "bookinstance": copy, "book": book},
        )

    def create_form(self) -> Rendered:
        return Rendered(
            "bookinstance_form",
            self._forms.book_instance_form("Create BookInstance", BookInstance()),
        )

    def create(self, data: Mapping[str, Any]) -> Outcome:
        result = validate_book_instance(data)
        self._guard.check_book_instance_references(result)
        copy = book_instance_from_values(result)

        if not result.is_valid:
            return Rendered(
                "bookinstance_form",
                self._forms.book_instance_form(
                    "Create BookInstance", copy, result.errors
                ),
            )

        created = self._store.book_instances.create(copy)
        logger.bind(book_instance_id=created.id, book_id=created.book).info(
            "Book copy created"
        )
        return Redirect(created.url)

    def update_form(self, book_instance_id: str) -> Rendered:
        copy = self._store.book_instances.get(book_instance_id)
        if copy is None:
            raise NotFoundError("Book copy", book_instance_id)
        return Rendered(
            "bookinstance_form",
            self._forms.book_instance_form("Update BookInstance", copy),
        )

    def update(self, book_instance_id: str, data: Mapping[str, Any]) -> Outcome:
        if self._store.book_instances.get(book_instance_id) is None:
            raise NotFoundError("Book copy", book_instance_id)

        result = validate_book_instance(data)
        self._guard.check_book_instance_references(result)
        copy = book_instance_from_values(result, book_instance_id)

        if not result.is_valid:
            return Rendered(
                "bookinstance_form",
                self._forms.book_instance_form(
                    "Update BookInstance", copy, result.errors
                ),
            )

        updated = self._store.book_instances.update(book_instance_id, copy)
        if updated is None:
            raise NotFoundError("Book copy", book_instance_id)
        logger.bind(book_instance_id=book_instance_id).info("Book copy updated")
        return Redirect(updated.url)

    def _delete_view(self, copy: BookInstance) -> Rendered:
        book = self._store.books.get(copy.book)
        return Rendered(
            "bookinstance_delete",
            {"title": "Delete BookInstance", "bookinstance": copy, "book": book},
        )

    def delete_form(self, book_instance_id: str) -> Outcome:
        check = self._guard.check_book_instance_delete(book_instance_id)
        if not check.found:
            return Redirect(BOOK_INSTANCES_URL)
        return self._delete_view(check.target)

    def delete(self, book_instance_id: str) -> Outcome:
        check = self._guard.check_book_instance_delete(book_instance_id)
        if not check.found:
            return Redirect(BOOK_INSTANCES_URL)

        self._store.book_instances.delete(book_instance_id)
        logger.bind(book_instance_id=book_instance_id).info("Book copy deleted")
        return Redirect(BOOK_INSTANCES_URL)
