"""Book pages."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.catalog.api.http.deps import get_catalog_service
from src.catalog.api.http.views import form_to_dict, render
from src.catalog.core.services.catalog import CatalogService

router = APIRouter(tags=["books"])


@router.get("/books", name="book_list")
def list_books(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> Response:
    """List all books by title."""
    return render(request, service.books.list_all())


@router.get("/book/create", name="book_create_form")
def create_book_form(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> Response:
    return render(request, service.books.create_form())


@router.post("/book/create", name="book_create")
def create_book(
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
    data: dict[str, Any] = Depends(form_to_dict),
) -> Response:
    """Create a book, or redisplay the form with its errors."""
    return render(request, service.books.create(data))


@router.get("/book/{book_id}", name="book_detail")
def get_book(
    book_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Show a book with its author, genres and copies."""
    return render(request, service.books.detail(book_id))


@router.get("/book/{book_id}/update", name="book_update_form")
def update_book_form(
    book_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    return render(request, service.books.update_form(book_id))


@router.post("/book/{book_id}/update", name="book_update")
def update_book(
    book_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
    data: dict[str, Any] = Depends(form_to_dict),
) -> Response:
    return render(request, service.books.update(book_id, data))


@router.get("/book/{book_id}/delete", name="book_delete_form")
def delete_book_form(
    book_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    return render(request, service.books.delete_form(book_id))


@router.post("/book/{book_id}/delete", name="book_delete")
def delete_book(
    book_id: str,
    request: Request,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Delete a book unless copies of it still exist."""
    return render(request, service.books.delete(book_id))
