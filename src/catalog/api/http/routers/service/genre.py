"""Genre pages."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.catalog.api.http.deps import get_catalog_service
from src.catalog.api.http.views import form_to_dict, render
from src.catalog.core.services.catalog import CatalogService

router = APIRouter(tags=["genres"])


@router.get("/genres", name="genre_list")
def list_genres(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> Response:
    """List all genres by name."""
    return render(request, service.genres.list_all())


@router.get("/genre/create", name="genre_create_form")
def create_genre_form(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> Response:
    return render(request, service.genres.create_form())


@router.post("/genre/create", name="genre_create")
def create_genre(
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
    data: dict[str, Any] = Depends(form_to_dict),
) -> Response:
    """Create a genre; an existing name redirects to that genre."""
    return render(request, service.genres.create(data))


@router.get("/genre/{genre_id}", name="genre_detail")
def get_genre(
    genre_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Show a genre with the books filed under it."""
    return render(request, service.genres.detail(genre_id))


@router.get("/genre/{genre_id}/update", name="genre_update_form")
def update_genre_form(
    genre_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    return render(request, service.genres.update_form(genre_id))


@router.post("/genre/{genre_id}/update", name="genre_update")
def update_genre(
    genre_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
    data: dict[str, Any] = Depends(form_to_dict),
) -> Response:
    return render(request, service.genres.update(genre_id, data))


@router.get("/genre/{genre_id}/delete", name="genre_delete_form")
def delete_genre_form(
    genre_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    return render(request, service.genres.delete_form(genre_id))


@router.post("/genre/{genre_id}/delete", name="genre_delete")
def delete_genre(
    genre_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Delete a genre unless books still use it."""
    return render(request, service.genres.delete(genre_id))
