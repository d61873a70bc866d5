"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.routers.catalog import router as catalog_router
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.http.routers.service import (
    author_router,
    book_router,
    bookinstance_router,
    genre_router,
)
from src.catalog.api.http.views import render_error
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.exceptions import CatalogError
from src.catalog.core.services.database import DbManageService, DbSessionService
from src.catalog.entities.core._base import CATALOG_PREFIX
from src.catalog.runtime.context import get_config

PACKAGE_TEMPLATES = Path(__file__).resolve().parents[2] / "templates"


def _templates_dir() -> Path:
    configured = get_config().app.templates_dir
    return Path(configured) if configured else PACKAGE_TEMPLATES


async def startup(app: FastAPI, database_service: DbSessionService | None) -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = database_service or DbSessionService()
    if not database_service.health_check():
        raise RuntimeError("Database connectivity check failed")
    DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    app_dependencies.database_service.dispose()


def create_app(database_service: DbSessionService | None = None) -> FastAPI:
    """Build the catalog application.

    ``database_service`` replaces the configured database, which is how tests
    run the app against an in-memory store.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup(app, database_service)
        try:
            yield
        finally:
            await shutdown(app)

    config = get_config()
    app = FastAPI(
        title=config.app.title,
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None,
    )
    app.state.templates = Jinja2Templates(directory=str(_templates_dir()))
    app.state.templates.env.globals["site_title"] = config.app.title

    # --- Request logging middleware ---
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        base_ctx = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        }

        start = time.perf_counter()
        with logger.contextualize(**base_ctx):
            try:
                logger.info("request.start")
                response = await call_next(request)
            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=500,
                    duration_ms=round(duration_ms, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                response = render_error(request, 500, "Internal Server Error", exc)
            else:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=response.status_code,
                    duration_ms=round(duration_ms, 1),
                ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

    # --- Error views ---
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        logger.bind(status_code=exc.status_code, error_type=type(exc).__name__).info(
            exc.message
        )
        return render_error(request, exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return render_error(request, exc.status_code, str(exc.detail))

    # --- Router registration ---
    app.include_router(health_router)
    app.include_router(catalog_router, prefix=CATALOG_PREFIX)
    app.include_router(book_router, prefix=CATALOG_PREFIX)
    app.include_router(author_router, prefix=CATALOG_PREFIX)
    app.include_router(genre_router, prefix=CATALOG_PREFIX)
    app.include_router(bookinstance_router, prefix=CATALOG_PREFIX)

    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(CATALOG_PREFIX, status_code=303)

    return app


configure_logging()
app = create_app()

# expose startup for tests
__all__ = ["app", "create_app", "startup", "shutdown"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,
    )
