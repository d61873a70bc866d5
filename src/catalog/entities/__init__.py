"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with derived values (URL, formatted dates)
- table.py: Database persistence model
- repository.py: Data access layer

``CatalogStore`` bundles the four repositories for one database session.
"""

from .service.author import Author, AuthorRepository, AuthorTable
from .service.book import Book, BookGenreLink, BookRepository, BookTable
from .service.bookinstance import (
    BookInstance,
    BookInstanceRepository,
    BookInstanceStatus,
    BookInstanceTable,
)
from .service.genre import Genre, GenreRepository, GenreTable
from .store import CatalogStore

__all__ = [
    "Author",
    "AuthorRepository",
    "AuthorTable",
    "Book",
    "BookGenreLink",
    "BookRepository",
    "BookTable",
    "BookInstance",
    "BookInstanceRepository",
    "BookInstanceStatus",
    "BookInstanceTable",
    "CatalogStore",
    "Genre",
    "GenreRepository",
    "GenreTable",
]
