"""Error Hierarchy — typed, categorized exceptions for all failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Upstream failures (unavailable, bad status, bad shape) share the UpstreamError base
    - Not-found is distinct from failure: 404, never 500
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with WpFrontendError base: resolvers catch UpstreamError at their
      boundary, framework handlers only see what escapes (ADR: uniform error shape)
    - Shape failures are their own variant: decode failure is an explicit error,
      not a runtime isinstance check scattered through resolvers
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    upstream_path: str | None = None
    params: dict[str, Any] | None = None


class WpFrontendError(Exception):
    """Base exception for all wp_frontend errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(WpFrontendError):
    """Slug or category lookup returned no match."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ConfigurationError(WpFrontendError):
    """Required configuration missing or invalid at startup."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class UpstreamError(WpFrontendError):
    """Base for every failure talking to the content backend."""


class UpstreamUnavailableError(UpstreamError):
    """Network failure or timeout reaching the content backend."""
    def __init__(
        self, message: str, timed_out: bool = False, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Upstream unavailable: {message}",
            "UPSTREAM_TIMEOUT" if timed_out else "UPSTREAM_UNAVAILABLE",
            ErrorCategory.TIMEOUT if timed_out else ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.timed_out = timed_out


class UpstreamStatusError(UpstreamError):
    """Content backend answered with a non-2xx status."""
    def __init__(self, status_code: int, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream responded with HTTP {status_code}",
            "UPSTREAM_STATUS", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.status_code = status_code


class UpstreamShapeError(UpstreamError):
    """Content backend answered with a body of unexpected shape."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unexpected upstream payload: {message}",
            "UPSTREAM_SHAPE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
