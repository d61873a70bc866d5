"""Turn catalog outcomes into HTTP responses."""

import traceback
from typing import Any

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from src.catalog.core.services.catalog import Outcome, Redirect
from src.catalog.runtime.context import get_config


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


async def form_to_dict(request: Request) -> dict[str, Any]:
    """Read a urlencoded or multipart body into a plain mapping.

    A field posted more than once (checkbox groups) becomes a list; any other
    field keeps its single value.
    """
    form = await request.form()
    data: dict[str, Any] = {}
    for key in form.keys():
        values = form.getlist(key)
        data[key] = values if len(values) > 1 else values[0]
    return data


def render(request: Request, outcome: Outcome) -> Response:
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.url, status_code=303)
    return get_templates(request).TemplateResponse(
        request,
        f"{outcome.view}.html",
        outcome.context,
        status_code=outcome.status_code,
    )


def render_error(
    request: Request, status_code: int, message: str, exc: BaseException | None = None
) -> Response:
    """Render the error view; the traceback is shown only in development."""
    detail = None
    if exc is not None and get_config().app.diagnostic:
        detail = "".join(traceback.format_exception(exc))
    return get_templates(request).TemplateResponse(
        request,
        "error.html",
        {
            "title": "Error",
            "message": message,
            "status_code": status_code,
            "detail": detail,
        },
        status_code=status_code,
    )
