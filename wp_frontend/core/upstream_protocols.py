"""Boundary Protocols — contracts between core/services and the upstream shell.

Invariants:
    - Resolvers depend on UpstreamClient, never on httpx or WordPressClient directly
    - UpstreamResult exposes the parsed body and the response headers, nothing else

Design Decisions:
    - Protocol over ABC: structural subtyping, the fake client in tests needs no
      inheritance (ADR: ExMA anti-pattern)
"""

from collections.abc import Mapping
from typing import Any, Protocol


class UpstreamResult(Protocol):
    data: Any
    headers: Mapping[str, str]


class UpstreamClient(Protocol):
    """Contract for the content-backend client — implemented by infrastructure."""
    async def get(
        self, path: str, params: dict[str, Any] | None = None,
    ) -> UpstreamResult: ...
