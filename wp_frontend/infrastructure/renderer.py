"""Renderer — Jinja2 templates behind a render(view, context) contract.

Invariants:
    - Resolvers never touch templates: they return a ViewResult, routes call render()
    - Template name comes from ViewName.template only
    - Status code from ViewResult is the response status (404/500 views included)
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import HTMLResponse

from wp_frontend.core.view_context import ViewResult

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(request: Request, result: ViewResult) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        result.view.template,
        result.context.to_template_context(),
        status_code=result.status_code,
    )
