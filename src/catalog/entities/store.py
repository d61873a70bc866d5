"""Store handle bundling the repositories of one database session."""

from dataclasses import dataclass

from sqlmodel import Session

from src.catalog.entities.service.author import AuthorRepository
from src.catalog.entities.service.book import BookRepository
from src.catalog.entities.service.bookinstance import BookInstanceRepository
from src.catalog.entities.service.genre import GenreRepository


@dataclass
class CatalogStore:
    authors: AuthorRepository
    genres: GenreRepository
    books: BookRepository
    book_instances: BookInstanceRepository

    @classmethod
    def from_session(cls, session: Session) -> "CatalogStore":
        return cls(
            authors=AuthorRepository(session),
            genres=GenreRepository(session),
            books=BookRepository(session),
            book_instances=BookInstanceRepository(session),
        )
