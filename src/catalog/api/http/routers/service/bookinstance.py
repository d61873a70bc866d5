"""BookInstance (copy) pages."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.catalog.api.http.deps import get_catalog_service
from src.catalog.api.http.views import form_to_dict, render
from src.catalog.core.services.catalog import CatalogService

router = APIRouter(tags=["bookinstances"])


@router.get("/bookinstances", name="bookinstance_list")
def list_book_instances(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> Response:
    """List all copies with their books."""
    return render(request, service.book_instances.list_all())


@router.get("/bookinstance/create", name="bookinstance_create_form")
def create_book_instance_form(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> Response:
    return render(request, service.book_instances.create_form())


@router.post("/bookinstance/create", name="bookinstance_create")
def create_book_instance(
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
    data: dict[str, Any] = Depends(form_to_dict),
) -> Response:
    """Create a copy, or redisplay the form with its errors."""
    return render(request, service.book_instances.create(data))


@router.get("/bookinstance/{copy_id}", name="bookinstance_detail")
def get_book_instance(
    copy_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Show a copy with its book."""
    return render(request, service.book_instances.detail(copy_id))


@router.get("/bookinstance/{copy_id}/update", name="bookinstance_update_form")
def update_book_instance_form(
    copy_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    return render(request, service.book_instances.update_form(copy_id))


@router.post("/bookinstance/{copy_id}/update", name="bookinstance_update")
def update_book_instance(
    copy_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
    data: dict[str, Any] = Depends(form_to_dict),
) -> Response:
    return render(request, service.book_instances.update(copy_id, data))


@router.get("/bookinstance/{copy_id}/delete", name="bookinstance_delete_form")
def delete_book_instance_form(
    copy_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    return render(request, service.book_instances.delete_form(copy_id))


@router.post("/bookinstance/{copy_id}/delete", name="bookinstance_delete")
def delete_book_instance(
    copy_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    return render(request, service.book_instances.delete(copy_id))
