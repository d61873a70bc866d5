"""Catalog service behaviour: validated writes, guarded deletes and views."""

from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.services.catalog import Redirect, Rendered
from src.catalog.entities import BookInstanceStatus
from tests.utils import add_author, add_book, add_copy, add_genre


def book_form_data(author_id: str, **overrides) -> dict:
    data = {
        "title": "Foundation",
        "author": author_id,
        "summary": "An empire falls.",
        "isbn": "9780553293357",
    }
    data.update(overrides)
    return data


class TestIndex:
    def test_counts(self, catalog_service, store):
        author = add_author(store)
        book = add_book(store, author)
        add_copy(store, book)
        add_copy(store, book, status=BookInstanceStatus.LOANED)
        add_genre(store)

        outcome = catalog_service.index()

        assert outcome.view == "index"
        assert outcome.context["data"] == {
            "book_count": 1,
            "book_instance_count": 2,
            "book_instance_available_count": 1,
            "author_count": 1,
            "genre_count": 1,
        }


class TestGenreService:
    def test_create_redirects_to_new_genre(self, catalog_service, store):
        outcome = catalog_service.genres.create({"name": "Fantasy"})

        genres = store.genres.find()
        assert outcome == Redirect(genres[0].url)

    def test_duplicate_name_redirects_to_existing(self, catalog_service, store):
        first = catalog_service.genres.create({"name": "Fantasy"})
        second = catalog_service.genres.create({"name": "FANTASY"})

        assert second.url == first.url
        assert store.genres.count() == 1

    def test_accented_names_are_distinct(self, catalog_service, store):
        first = catalog_service.genres.create({"name": "café"})
        second = catalog_service.genres.create({"name": "cafe"})

        assert first.url != second.url
        assert store.genres.count() == 2

    def test_invalid_name_redisplays_form(self, catalog_service, store):
        outcome = catalog_service.genres.create({"name": " ab "})

        assert isinstance(outcome, Rendered)
        assert outcome.view == "genre_form"
        assert outcome.context["title"] == "Create Genre"
        assert outcome.context["genre"].name == "ab"
        assert outcome.context["field_errors"] == {
            "name": ["Genre name must contain at least 3 characters"]
        }
        assert store.genres.count() == 0

    def test_rename_to_existing_name_is_refused(self, catalog_service, store):
        add_genre(store, "Fantasy")
        horror = add_genre(store, "Horror")

        outcome = catalog_service.genres.update(horror.id, {"name": "fantasy"})

        assert outcome.view == "genre_form"
        assert [error.message for error in outcome.context["errors"]] == [
            "A genre with this name already exists"
        ]
        assert (store.genres.get(horror.id)).name == "Horror"

    def test_rename_same_genre_changes_case(self, catalog_service, store):
        genre = add_genre(store, "fantasy")

        outcome = catalog_service.genres.update(genre.id, {"name": "Fantasy"})

        assert outcome == Redirect(genre.url)
        assert (store.genres.get(genre.id)).name == "Fantasy"

    def test_delete_refused_while_books_use_it(self, catalog_service, store):
        author = add_author(store)
        genre = add_genre(store)
        add_book(store, author, genres=[genre])

        outcome = catalog_service.genres.delete(genre.id)

        assert outcome.view == "genre_delete"
        assert len(outcome.context["genre_books"]) == 1
        assert store.genres.get(genre.id) is not None

    def test_detail_lists_books(self, catalog_service, store):
        author = add_author(store)
        genre = add_genre(store)
        book = add_book(store, author, genres=[genre])

        outcome = catalog_service.genres.detail(genre.id)

        assert outcome.context["genre"] == genre
        assert outcome.context["genre_books"] == [book]


class TestBookService:
    def test_create_redirects_to_detail(self, catalog_service, store):
        author = add_author(store)
        genre = add_genre(store)

        outcome = catalog_service.books.create(
            book_form_data(author.id, genre=genre.id)
        )

        [book] = store.books.find()
        assert outcome == Redirect(book.url)
        assert book.genre == [genre.id]

    def test_update_with_empty_title_redisplays_form(self, catalog_service, store):
        tolkien = add_author(store, "John", "Tolkien")
        austen = add_author(store, "Jane", "Austen")
        poetry = add_genre(store, "Poetry")
        drama = add_genre(store, "Drama")
        book = add_book(store, tolkien, genres=[poetry])

        outcome = catalog_service.books.update(
            book.id, book_form_data(tolkien.id, title="", genre=[poetry.id])
        )

        assert outcome.view == "book_form"
        assert outcome.context["title"] == "Update Book"
        assert [(e.field, e.message) for e in outcome.context["errors"]] == [
            ("title", "Title must not be empty.")
        ]
        authors = outcome.context["authors"]
        genres = outcome.context["genres"]
        assert [option.label for option in authors] == [austen.name, tolkien.name]
        assert [option.label for option in genres] == ["Drama", "Poetry"]
        assert [option.value for option in authors if option.selected] == [tolkien.id]
        assert [option.value for option in genres if option.selected] == [poetry.id]
        assert drama.id not in outcome.context["book"].genre
        assert (store.books.get(book.id)).title == "Foundation"

    def test_unknown_author_is_a_field_error(self, catalog_service, store):
        outcome = catalog_service.books.create(book_form_data("nobody"))

        assert outcome.context["field_errors"] == {"author": ["Author not found"]}
        assert store.books.count() == 0

    def test_unknown_genre_is_a_field_error(self, catalog_service, store):
        author = add_author(store)

        outcome = catalog_service.books.create(
            book_form_data(author.id, genre=["missing"])
        )

        assert outcome.context["field_errors"] == {"genre": ["Genre not found"]}

    def test_update_form_marks_persisted_selection(self, catalog_service, store):
        author = add_author(store)
        poetry = add_genre(store, "Poetry")
        add_genre(store, "Drama")
        book = add_book(store, author, genres=[poetry])

        outcome = catalog_service.books.update_form(book.id)

        selected = [option.label for option in outcome.context["genres"] if option.selected]
        assert selected == ["Poetry"]
        assert outcome.context["errors"] == []

    def test_delete_without_copies(self, catalog_service, store):
        author = add_author(store)
        book = add_book(store, author)

        outcome = catalog_service.books.delete(book.id)

        assert outcome == Redirect("/catalog/books")
        assert store.books.get(book.id) is None

    def test_delete_refused_with_copies(self, catalog_service, store):
        author = add_author(store)
        book = add_book(store, author)
        copy = add_copy(store, book)

        outcome = catalog_service.books.delete(book.id)

        assert outcome.view == "book_delete"
        assert outcome.context["book_instances"] == [copy]
        assert store.books.get(book.id) is not None

    def test_delete_missing_book_redirects(self, catalog_service):
        assert catalog_service.books.delete_form("missing") == Redirect("/catalog/books")
        assert catalog_service.books.delete("missing") == Redirect("/catalog/books")

    def test_detail_resolves_references(self, catalog_service, store):
        author = add_author(store)
        poetry = add_genre(store, "Poetry")
        drama = add_genre(store, "Drama")
        book = add_book(store, author, genres=[poetry, drama])
        copy = add_copy(store, book)

        outcome = catalog_service.books.detail(book.id)

        assert outcome.context["author"] == author
        assert [genre.name for genre in outcome.context["genres"]] == ["Drama", "Poetry"]
        assert outcome.context["book_instances"] == [copy]

    def test_detail_unknown_book_is_not_found(self, catalog_service):
        with pytest.raises(NotFoundError) as excinfo:
            catalog_service.books.detail("missing")

        assert excinfo.value.status_code == 404
        assert excinfo.value.entity_id == "missing"

    def test_update_missing_book_is_not_found(self, catalog_service, store):
        author = add_author(store)
        with pytest.raises(NotFoundError):
            catalog_service.books.update("missing", book_form_data(author.id))

    def test_store_failure_propagates(self, catalog_service, session):
        session.connection().exec_driver_sql("DROP TABLE book")

        with pytest.raises(OperationalError):
            catalog_service.books.list_all()

    def test_list_sorted_with_authors(self, catalog_service, store):
        author = add_author(store)
        add_book(store, author, "Robots")
        add_book(store, author, "Foundation")

        outcome = catalog_service.books.list_all()

        rows = outcome.context["book_list"]
        assert [row["book"].title for row in rows] == ["Foundation", "Robots"]
        assert all(row["author"] == author for row in rows)


class TestBookInstanceService:
    def test_create_without_due_back(self, catalog_service, store):
        author = add_author(store)
        book = add_book(store, author)

        outcome = catalog_service.book_instances.create(
            {"book": book.id, "imprint": "Penguin", "status": "Loaned", "due_back": ""}
        )

        [copy] = store.book_instances.find()
        assert outcome == Redirect(copy.url)
        assert copy.due_back_formatted == (
            f"{copy.created_at:%b} {copy.created_at.day}, {copy.created_at.year}"
        )

    def test_update_form_reselects_status(self, catalog_service, store):
        author = add_author(store)
        book = add_book(store, author)
        copy = add_copy(store, book, status=BookInstanceStatus.RESERVED)

        outcome = catalog_service.book_instances.update_form(copy.id)

        statuses = outcome.context["status_list"]
        assert [option.value for option in statuses] == [
            "Available",
            "Maintenance",
            "Loaned",
            "Reserved",
        ]
        assert [option.value for option in statuses if option.selected] == ["Reserved"]
        assert [option.value for option in outcome.context["book_list"] if option.selected] == [
            book.id
        ]

    def test_invalid_status_redisplays_with_default(self, catalog_service, store):
        author = add_author(store)
        book = add_book(store, author)

        outcome = catalog_service.book_instances.create(
            {"book": book.id, "imprint": "Penguin", "status": "Lost", "due_back": "soon"}
        )

        assert outcome.view == "bookinstance_form"
        assert set(outcome.context["field_errors"]) == {"status", "due_back"}
        assert outcome.context["bookinstance"].status is BookInstanceStatus.MAINTENANCE
        assert outcome.context["bookinstance"].due_back is None

    def test_unknown_book(self, catalog_service):
        outcome = catalog_service.book_instances.create(
            {"book": "missing", "imprint": "Penguin"}
        )
        assert outcome.context["field_errors"] == {"book": ["Book not found"]}

    def test_delete(self, catalog_service, store):
        author = add_author(store)
        book = add_book(store, author)
        copy = add_copy(store, book)

        confirm = catalog_service.book_instances.delete_form(copy.id)
        assert confirm.context["book"] == book

        outcome = catalog_service.book_instances.delete(copy.id)
        assert outcome == Redirect("/catalog/bookinstances")
        assert store.book_instances.count() == 0

    def test_detail_unknown_copy(self, catalog_service):
        with pytest.raises(NotFoundError):
            catalog_service.book_instances.detail("missing")


class TestAuthorService:
    def test_create(self, catalog_service, store):
        outcome = catalog_service.authors.create(
            {"first_name": "Ursula", "family_name": "LeGuin", "date_of_birth": "1929-10-21"}
        )

        [author] = store.authors.find()
        assert outcome == Redirect(author.url)
        assert author.lifespan == "Oct 21, 1929 -"

    def test_invalid_date_redisplays_blank(self, catalog_service):
        outcome = catalog_service.authors.create(
            {"first_name": "Ursula", "family_name": "LeGuin", "date_of_birth": "someday"}
        )

        assert outcome.view == "author_form"
        assert outcome.context["author"].date_of_birth is None
        assert outcome.context["field_errors"] == {
            "date_of_birth": ["Invalid date of birth"]
        }

    def test_delete_refused_while_books_exist(self, catalog_service, store):
        author = add_author(store)
        add_book(store, author, "Robots")
        add_book(store, author, "Foundation")

        outcome = catalog_service.authors.delete(author.id)

        assert outcome.view == "author_delete"
        assert [book.title for book in outcome.context["author_books"]] == [
            "Foundation",
            "Robots",
        ]

    def test_delete(self, catalog_service, store):
        author = add_author(store)

        assert catalog_service.authors.delete(author.id) == Redirect("/catalog/authors")
        assert store.authors.count() == 0

    def test_update(self, catalog_service, store):
        author = add_author(store)

        outcome = catalog_service.authors.update(
            author.id, {"first_name": "Isaac", "family_name": "Azimov"}
        )

        assert outcome == Redirect(author.url)
        assert (store.authors.get(author.id)).family_name == "Azimov"

    def test_update_form_unknown_author(self, catalog_service):
        with pytest.raises(NotFoundError):
            catalog_service.authors.update_form("missing")

    def test_list_sorted_by_family_name(self, catalog_service, store):
        add_author(store, "Zadie", "Smith")
        add_author(store, "Jane", "Austen")

        outcome = catalog_service.authors.list_all()
        assert [a.family_name for a in outcome.context["author_list"]] == ["Austen", "Smith"]


def test_copy_with_past_due_date_keeps_it(catalog_service, store):
    author = add_author(store)
    book = add_book(store, author)

    catalog_service.book_instances.create(
        {"book": book.id, "imprint": "Penguin", "status": "Loaned", "due_back": "2020-02-03"}
    )

    [copy] = store.book_instances.find()
    assert copy.due_back == date(2020, 2, 3)


@pytest.mark.parametrize("kind", ["books", "authors", "genres", "book_instances"])
def test_update_missing_record_with_invalid_input_is_not_found(catalog_service, kind):
    with pytest.raises(NotFoundError):
        getattr(catalog_service, kind).update("missing", {})
