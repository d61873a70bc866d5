from src.catalog.entities.core._repository import EntityRepository
from src.catalog.entities.service.author.entity import Author
from src.catalog.entities.service.author.table import AuthorTable


class AuthorRepository(EntityRepository[Author, AuthorTable]):
    """Data-access layer for authors."""

    entity_type = Author
    table_type = AuthorTable
