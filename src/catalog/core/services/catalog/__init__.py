"""Catalog use cases.

Every operation returns an outcome for the HTTP layer to carry out: a view to
render with its context, or a URL to redirect to. Missing records raise
``NotFoundError``; store failures propagate unchanged.
"""


from src.catalog.core.services.catalog.author import AuthorService
from src.catalog.core.services.catalog.book import BookService
from src.catalog.core.services.catalog.bookinstance import BookInstanceService
from src.catalog.core.services.catalog.genre import GenreService
from src.catalog.core.services.catalog.outcomes import Outcome, Redirect, Rendered
from src.catalog.core.services.forms import FormStateReconciler
from src.catalog.core.services.integrity import IntegrityGuard
from src.catalog.entities import BookInstanceStatus, CatalogStore


class CatalogService:
    """Entry point bundling the per-entity services over one store handle."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store
        guard = IntegrityGuard(store)
        forms = FormStateReconciler(store)
        self.books = BookService(store, guard, forms)
        self.authors = AuthorService(store, guard, forms)
        self.genres = GenreService(store, guard, forms)
        self.book_instances = BookInstanceService(store, guard, forms)

    def counts(self) -> dict[str, int]:
        """Record counts for the home page."""
        return {
            "book_count": self.store.books.count(),
            "book_instance_count": self.store.book_instances.count(),
            "book_instance_available_count": self.store.book_instances.count(
                status=BookInstanceStatus.AVAILABLE
            ),
            "author_count": self.store.authors.count(),
            "genre_count": self.store.genres.count(),
        }

    def index(self) -> Rendered:
        return Rendered("index", {"title": "Local Library Home", "data": self.counts()})


__all__ = [
    "AuthorService",
    "BookInstanceService",
    "BookService",
    "CatalogService",
    "GenreService",
    "Outcome",
    "Redirect",
    "Rendered",
]
