"""Entity package: Book."""

from .entity import Book
from .repository import BookRepository
from .table import BookGenreLink, BookTable

__all__ = ["Book", "BookGenreLink", "BookRepository", "BookTable"]
