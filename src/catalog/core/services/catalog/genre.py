"""Genre use cases.

Genre names are unique ignoring case: creating a name that already exists
redirects to the existing genre instead of adding a second one.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.services.catalog.outcomes import Outcome, Redirect, Rendered
from src.catalog.core.services.forms import FormStateReconciler
from src.catalog.core.services.integrity import IntegrityGuard
from src.catalog.core.validation.catalog_rules import validate_genre
from src.catalog.entities import Book, CatalogStore, Genre
from src.catalog.entities.core._base import collection_url

GENRES_URL = collection_url("genre")


class GenreService:
    def __init__(
        self, store: CatalogStore, guard: IntegrityGuard, forms: FormStateReconciler
    ) -> None:
        self._store = store
        self._guard = guard
        self._forms = forms

    def list_all(self) -> Rendered:
        genres = self._store.genres.find(sort=("name",))
        return Rendered("genre_list", {"title": "Genre List", "genre_list": genres})

    def detail(self, genre_id: str) -> Rendered:
        genre = self._store.genres.get(genre_id)
        books = self._store.books.find_by_genre(genre_id)
        if genre is None:
            raise NotFoundError("Genre", genre_id)
        return Rendered(
            "genre_detail",
            {"title": "Genre Detail", "genre": genre, "genre_books": books},
        )

    def create_form(self) -> Rendered:
        return Rendered("genre_form", self._forms.genre_form("Create Genre", Genre()))

    def create(self, data: Mapping[str, Any]) -> Outcome:
        result = validate_genre(data)
        genre = Genre(name=result.values["name"])

        if not result.is_valid:
            return Rendered(
                "genre_form",
                self._forms.genre_form("Create Genre", genre, result.errors),
            )

        existing = self._guard.existing_genre(genre.name)
        if existing is not None:
            logger.bind(genre_id=existing.id, name=genre.name).info(
                "Duplicate genre, redirecting to the existing one"
            )
            return Redirect(existing.url)

        created = self._store.genres.create(genre)
        logger.bind(genre_id=created.id).info("Genre created")
        return Redirect(created.url)

    def update_form(self, genre_id: str) -> Rendered:
        genre = self._store.genres.get(genre_id)
        if genre is None:
            raise NotFoundError("Genre", genre_id)
        return Rendered("genre_form", self._forms.genre_form("Update Genre", genre))

    def update(self, genre_id: str, data: Mapping[str, Any]) -> Outcome:
        if self._store.genres.get(genre_id) is None:
            raise NotFoundError("Genre", genre_id)

        result = validate_genre(data)
        if result.is_valid:
            self._guard.check_genre_rename(genre_id, result.values["name"], result)
        genre = Genre(id=genre_id, name=result.values["name"])

        if not result.is_valid:
            return Rendered(
                "genre_form",
                self._forms.genre_form("Update Genre", genre, result.errors),
            )

        updated = self._store.genres.update(genre_id, genre)
        if updated is None:
            raise NotFoundError("Genre", genre_id)
        logger.bind(genre_id=genre_id).info("Genre updated")
        return Redirect(updated.url)

    def _delete_view(self, genre: Genre, books: list[Book]) -> Rendered:
        return Rendered(
            "genre_delete",
            {"title": "Delete Genre", "genre": genre, "genre_books": books},
        )

    def delete_form(self, genre_id: str) -> Outcome:
        check = self._guard.check_genre_delete(genre_id)
        if not check.found:
            return Redirect(GENRES_URL)
        return self._delete_view(check.target, check.dependents)

    def delete(self, genre_id: str) -> Outcome:
        check = self._guard.check_genre_delete(genre_id)
        if not check.found:
            return Redirect(GENRES_URL)
        if not check.allowed:
            logger.bind(genre_id=genre_id, books=len(check.dependents)).info(
                "Genre delete refused: books exist"
            )
            return self._delete_view(check.target, check.dependents)

        self._store.genres.delete(genre_id)
        logger.bind(genre_id=genre_id).info("Genre deleted")
        return Redirect(GENRES_URL)
