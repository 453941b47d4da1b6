"""WP Frontend — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers render the HTML error view, never JSON, never a traceback
    - Upstream client created once on startup via lifespan, closed on shutdown
    - Missing WP_URL is fatal: run() exits(1) before binding a port

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Settings resolved inside lifespan/run, not at import: importing the app has no
      environment requirements (tests, tooling)
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from wp_frontend import __version__
from wp_frontend.api.error_handlers import register_error_handlers
from wp_frontend.api.routes import blog, health
from wp_frontend.config import Settings, get_settings
from wp_frontend.core.domain_types import ApiMode
from wp_frontend.core.errors import ConfigurationError
from wp_frontend.infrastructure.observability import setup_logging
from wp_frontend.infrastructure.renderer import TEMPLATES_DIR
from wp_frontend.infrastructure.wordpress_client import close_client, init_client

logger = logging.getLogger(__name__)

STATIC_DIR = TEMPLATES_DIR.parent / "static"


def log_api_mode(settings: Settings) -> None:
    if settings.api_mode is ApiMode.AUTHENTICATED:
        logger.info(
            "API connection configured in Authenticated Mode.",
            extra={"api_mode": settings.api_mode.value},
        )
    else:
        logger.warning(
            "API connection configured in Public Mode. "
            "Only published content will be accessible.",
            extra={"api_mode": settings.api_mode.value},
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_client(
        settings.api_base_url,
        api_key=settings.wp_api_key,
        timeout_seconds=settings.upstream_timeout_seconds,
    )
    log_api_mode(settings)
    logger.info(f"WP Frontend started, upstream {settings.api_base_url}")
    yield
    await close_client()
    logger.info("WP Frontend shutting down")


app = FastAPI(
    title="WP Frontend", version=__version__, lifespan=lifespan,
    docs_url=None, redoc_url=None, openapi_url=None,
)

register_error_handlers(app)

# Routes — explicit registration (ExMA: no convention-over-config)
app.include_router(health.router)
app.include_router(blog.router)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def load_settings_or_exit() -> Settings:
    """Resolve settings once; a missing WP_URL terminates the process."""
    try:
        return get_settings()
    except ValidationError as e:
        setup_logging()
        missing = {".".join(str(p) for p in err["loc"]) for err in e.errors()}
        if "wp_url" in missing:
            error = ConfigurationError(
                "FATAL ERROR: WP_URL must be defined in your .env file.",
            )
        else:
            error = ConfigurationError(f"FATAL ERROR: invalid configuration: {e}")
        logger.critical(error.message, extra={"error_code": error.code})
        sys.exit(1)


def run() -> None:
    """Console entry point: validate config, then serve with uvicorn."""
    settings = load_settings_or_exit()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server is running and available at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
