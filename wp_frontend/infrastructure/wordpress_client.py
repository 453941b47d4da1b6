"""WordPress Client — wraps httpx.AsyncClient with timeout, auth mode, and error mapping.

Invariants:
    - Bound to exactly one base URL ({WP_URL}/wp-json/wp/v2) for the process lifetime
    - Authorization header present iff ApiMode.AUTHENTICATED
    - Every call is bounded by the configured timeout; expiry == network failure
    - All failures mapped to UpstreamError subclasses (core/errors.py), never swallowed
    - No retries: one attempt per call per request

Design Decisions:
    - Wrapper over raw httpx: resolvers never see httpx exceptions (ADR: single responsibility)
    - Singleton wp_client initialized in lifespan, exposed via get_wp_client dependency
      (ADR: no global import side effects, tests override the dependency)
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from wp_frontend.core.domain_types import ApiMode
from wp_frontend.core.errors import (
    ErrorContext,
    UpstreamShapeError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamResponse:
    """Parsed JSON body plus the response headers (pagination lives there)."""
    data: Any
    headers: httpx.Headers = field(default_factory=httpx.Headers)


class WordPressClient:
    """Issues GETs against the WordPress REST API."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.mode = ApiMode.AUTHENTICATED if api_key else ApiMode.PUBLIC
        headers = {"Accept": "application/json"}
        if self.mode is ApiMode.AUTHENTICATED:
            headers["Authorization"] = f"Bearer {api_key}"
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    async def get(
        self, path: str, params: dict[str, Any] | None = None,
    ) -> UpstreamResponse:
        """GET {base}{path}?params -> UpstreamResponse, or raise UpstreamError."""
        context = ErrorContext(upstream_path=path, params=params)
        try:
            response = await self.client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.error(
                f"Upstream timeout: {e!r}", extra={"upstream_path": path},
            )
            raise UpstreamUnavailableError(
                "request timed out", timed_out=True, context=context,
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                f"Upstream request failed: {e!r}", extra={"upstream_path": path},
            )
            raise UpstreamUnavailableError(str(e) or type(e).__name__, context=context) from e

        if not response.is_success:
            logger.error(
                f"Upstream returned HTTP {response.status_code}",
                extra={"upstream_path": path, "status_code": response.status_code},
            )
            raise UpstreamStatusError(response.status_code, context=context)

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamShapeError("response body is not JSON", context=context) from e

        return UpstreamResponse(data=data, headers=response.headers)

    async def health_check(self) -> bool:
        """Check the API namespace root answers (for readiness probes)."""
        try:
            await self.get("/")
            return True
        except UpstreamUnavailableError as e:
            logger.error(f"Upstream health check failed: {e.message}")
            return False
        except (UpstreamStatusError, UpstreamShapeError) as e:
            logger.warning(f"Upstream health check degraded: {e.message}")
            return False

    async def aclose(self) -> None:
        await self.client.aclose()


# Singleton (initialized on startup)
wp_client: WordPressClient | None = None


def init_client(base_url: str, **kwargs) -> WordPressClient:
    global wp_client
    wp_client = WordPressClient(base_url, **kwargs)
    return wp_client


async def close_client() -> None:
    global wp_client
    if wp_client is not None:
        await wp_client.aclose()
        wp_client = None


def get_wp_client() -> WordPressClient:
    """FastAPI dependency for the upstream client."""
    if not wp_client:
        raise RuntimeError("WordPress client not initialized")
    return wp_client
