"""Record builders shared by the catalog tests."""

from datetime import date

from src.catalog.entities import (
    Author,
    Book,
    BookInstance,
    BookInstanceStatus,
    CatalogStore,
    Genre,
)


def add_author(
    store: CatalogStore,
    first_name: str = "Isaac",
    family_name: str = "Asimov",
    date_of_birth: date | None = None,
) -> Author:
    return store.authors.create(
        Author(first_name=first_name, family_name=family_name, date_of_birth=date_of_birth)
    )


def add_genre(store: CatalogStore, name: str = "Science Fiction") -> Genre:
    return store.genres.create(Genre(name=name))


def add_book(
    store: CatalogStore,
    author: Author,
    title: str = "Foundation",
    genres: list[Genre] | None = None,
) -> Book:
    return store.books.create(
        Book(
            title=title,
            summary="An empire falls.",
            isbn="9780553293357",
            author=author.id,
            genre=[genre.id for genre in genres or []],
        )
    )


def add_copy(
    store: CatalogStore,
    book: Book,
    status: BookInstanceStatus = BookInstanceStatus.AVAILABLE,
    due_back: date | None = None,
) -> BookInstance:
    return store.book_instances.create(
        BookInstance(book=book.id, imprint="Gnome Press, 1951", status=status, due_back=due_back)
    )
