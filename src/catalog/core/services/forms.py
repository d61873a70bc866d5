"""Rebuild form view-models for create and update pages.

The same builders serve the empty create form, the populated update form and
the redisplay after a failed submission: reference lists are reloaded and
every option found in the entity's current selection is marked selected, so
the operator never has to re-enter a value.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel

from src.catalog.core.validation import FieldError
from src.catalog.entities import Author, Book, BookInstance, CatalogStore, Genre
from src.catalog.entities.service.bookinstance.entity import STATUS_VALUES


class SelectOption(BaseModel):
    """One entry of a select list or checkbox group."""

    value: str
    label: str
    selected: bool = False


def build_options(
    items: Iterable[tuple[str, str]], selected: Iterable[str] = ()
) -> list[SelectOption]:
    """Turn ``(value, label)`` pairs into options, marking the selected ones."""
    chosen = set(selected)
    return [
        SelectOption(value=value, label=label, selected=value in chosen)
        for value, label in items
    ]


def group_errors(errors: Sequence[FieldError]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for error in errors:
        grouped.setdefault(error.field, []).append(error.message)
    return grouped


def _form(title: str, errors: Sequence[FieldError] | None, **context: Any) -> dict[str, Any]:
    errors = list(errors or [])
    return {
        "title": title,
        "errors": errors,
        "field_errors": group_errors(errors),
        **context,
    }


class FormStateReconciler:
    """Builds form view-models from entities and the store's reference data."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def book_references(self) -> tuple[list[Author], list[Genre]]:
        return (
            self._store.authors.find(sort=("family_name", "first_name")),
            self._store.genres.find(sort=("name",)),
        )

    def book_form(
        self,
        title: str,
        book: Book,
        errors: Sequence[FieldError] | None = None,
    ) -> dict[str, Any]:
        authors, genres = self.book_references()
        return _form(
            title,
            errors,
            book=book,
            authors=build_options(
                ((author.id, author.name) for author in authors), [book.author]
            ),
            genres=build_options(((genre.id, genre.name) for genre in genres), book.genre),
        )

    def book_choices(self) -> list[Book]:
        return self._store.books.find(sort=("title",))

    def book_instance_form(
        self,
        title: str,
        book_instance: BookInstance,
        errors: Sequence[FieldError] | None = None,
    ) -> dict[str, Any]:
        books = self.book_choices()
        return _form(
            title,
            errors,
            bookinstance=book_instance,
            book_list=build_options(
                ((book.id, book.title) for book in books), [book_instance.book]
            ),
            status_list=build_options(
                ((status, status) for status in STATUS_VALUES),
                [str(book_instance.status)],
            ),
        )

    def genre_form(
        self, title: str, genre: Genre, errors: Sequence[FieldError] | None = None
    ) -> dict[str, Any]:
        return _form(title, errors, genre=genre)

    def author_form(
        self, title: str, author: Author, errors: Sequence[FieldError] | None = None
    ) -> dict[str, Any]:
        return _form(title, errors, author=author)
