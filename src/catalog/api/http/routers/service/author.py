"""Author pages."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.catalog.api.http.deps import get_catalog_service
from src.catalog.api.http.views import form_to_dict, render
from src.catalog.core.services.catalog import CatalogService

router = APIRouter(tags=["authors"])


@router.get("/authors", name="author_list")
def list_authors(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> Response:
    """List all authors by family name."""
    return render(request, service.authors.list_all())


@router.get("/author/create", name="author_create_form")
def create_author_form(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> Response:
    return render(request, service.authors.create_form())


@router.post("/author/create", name="author_create")
def create_author(
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
    data: dict[str, Any] = Depends(form_to_dict),
) -> Response:
    """Create an author, or redisplay the form with its errors."""
    return render(request, service.authors.create(data))


@router.get("/author/{author_id}", name="author_detail")
def get_author(
    author_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Show an author with their books."""
    return render(request, service.authors.detail(author_id))


@router.get("/author/{author_id}/update", name="author_update_form")
def update_author_form(
    author_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    return render(request, service.authors.update_form(author_id))


@router.post("/author/{author_id}/update", name="author_update")
def update_author(
    author_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
    data: dict[str, Any] = Depends(form_to_dict),
) -> Response:
    return render(request, service.authors.update(author_id, data))


@router.get("/author/{author_id}/delete", name="author_delete_form")
def delete_author_form(
    author_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    return render(request, service.authors.delete_form(author_id))


@router.post("/author/{author_id}/delete", name="author_delete")
def delete_author(
    author_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Delete an author unless books still reference them."""
    return render(request, service.authors.delete(author_id))
