"""Error Handlers — framework-level fallbacks that still render the error view.

Invariants:
    - Only requests that never reach a resolver land here (unknown route, bad method,
      unexpected crash outside a resolver)
    - HTTPException 404 -> error view, "Page Not Found"
    - Exception (catch-all) -> error view, 500, never leaks internal details
    - Error views carry empty sidebar lists (no upstream calls from a failure path)

Design Decisions:
    - Three-layer handler: HTTP (Starlette), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from wp_frontend.core.view_context import error_view
from wp_frontend.infrastructure.renderer import render

logger = logging.getLogger(__name__)

PAGE_NOT_FOUND = "The page you were looking for could not be found."
GENERIC_ERROR = "An unexpected error occurred."


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing-level HTTP errors (404, 405)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.info(
                f"No route for {request.url.path}",
                extra={"status_code": exc.status_code},
            )
            result = error_view(
                PAGE_NOT_FOUND, title="Page Not Found", status_code=404,
            )
        else:
            logger.warning(
                f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
                extra={"status_code": exc.status_code},
            )
            result = error_view(str(exc.detail), status_code=exc.status_code)
        response = render(request, result)
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return render(request, error_view(
            "The request could not be understood.",
            status_code=status.HTTP_400_BAD_REQUEST,
        ))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return render(request, error_view(GENERIC_ERROR))
