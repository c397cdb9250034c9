"""Jinja2 environment shared by the HTML pages and the HTML error handler."""

from __future__ import annotations

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from mma_scheduler.schemas.error import ErrorPage
from mma_scheduler.utils.date_math import utc_now
from mma_scheduler.utils.weight_classes import division_anchor

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["division_anchor"] = division_anchor
templates.env.globals["current_year"] = lambda: utc_now().year


def render_error_page(request: Request, page: ErrorPage) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"page": page, "title": page.title},
        status_code=page.status_code,
    )
