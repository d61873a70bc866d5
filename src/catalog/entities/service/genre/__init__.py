"""Entity package: Genre."""

from .entity import Genre
from .repository import GenreRepository
from .table import GenreTable

__all__ = ["Genre", "GenreRepository", "GenreTable"]
