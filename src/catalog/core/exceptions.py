"""Classified errors raised by the catalog core.

Handlers registered on the FastAPI application turn these into the error
view; anything that is not a ``CatalogError`` (store failures included) is
reported as a 500.
"""


class CatalogError(Exception):
    """Base class for errors carrying an HTTP-style status code."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(CatalogError):
    """Raised when a page needs an entity that does not exist."""

    status_code = 404

    def __init__(self, kind: str, entity_id: str | None = None) -> None:
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.entity_id = entity_id
