"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Post and Category are opaque upstream bags: read, reshaped, never mutated
    - Every renderable view is a ViewName member — no raw template strings in resolvers
    - ApiMode has exactly two states, chosen once at startup

Design Decisions:
    - Type aliases over dataclasses for entities: upstream owns the schema, only a few
      fields are inspected (ADR: schema-less content)
    - str Enums: usable directly as template names and log fields
"""

from enum import Enum
from typing import Any


# ─── Entity Types ────────────────────────────────────────────────

Post = dict[str, Any]
Category = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class ApiMode(str, Enum):
    """Upstream access mode — AUTHENTICATED sees private/unpublished content."""
    AUTHENTICATED = "authenticated"
    PUBLIC = "public"


class ViewName(str, Enum):
    """The four views the renderer knows about."""
    LISTING = "listing"
    SINGLE_ITEM = "single-item"
    ARCHIVE = "archive"
    ERROR = "error"

    @property
    def template(self) -> str:
        return _TEMPLATES[self]


_TEMPLATES = {
    ViewName.LISTING: "index.html",
    ViewName.SINGLE_ITEM: "single-post.html",
    ViewName.ARCHIVE: "category-archive.html",
    ViewName.ERROR: "error.html",
}


# ─── Upstream Page Sizes ─────────────────────────────────────────

POSTS_PER_PAGE = 10
SIDEBAR_CATEGORY_LIMIT = 20
SIDEBAR_RECENT_POSTS = 5
