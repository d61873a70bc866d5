"""Catalog home page."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.catalog.api.http.deps import get_catalog_service
from src.catalog.api.http.views import render
from src.catalog.core.services.catalog import CatalogService

router = APIRouter(tags=["catalog"])


@router.get("", name="catalog_index")
def index(
    request: Request, service: CatalogService = Depends(get_catalog_service)
) -> Response:
    """Home page with record counts."""
    return render(request, service.index())
