"""FastAPI dependency implementations."""

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services.catalog import CatalogService
from src.catalog.entities import CatalogStore


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Open a session for the request and close it once the response is sent."""
    app_deps = get_app_dependencies(request)
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_catalog_service(session: Session = Depends(get_db_session)) -> CatalogService:
    """Catalog service over a store bound to the request's session."""
    return CatalogService(CatalogStore.from_session(session))
