from .author import router as author_router
from .book import router as book_router
from .bookinstance import router as bookinstance_router
from .genre import router as genre_router

__all__ = ["author_router", "book_router", "bookinstance_router", "genre_router"]
