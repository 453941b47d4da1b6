"""View Context — immutable, request-scoped value bags handed to the renderer.

Invariants:
    - Every template context contains `categories` and `recentPosts` (possibly empty)
    - Optional keys (posts, post, category, currentPage, totalPages, message) are
      omitted when unset — templates test presence, not None
    - current_page / total_pages, when present, are positive ints
    - Nothing here mutates the upstream entities it carries

Design Decisions:
    - Frozen dataclasses built field by field instead of dict spreading: the
      set of keys a view receives is visible at the construction site
    - camelCase keys only at the template boundary (to_template_context)
"""

from dataclasses import dataclass, field

from wp_frontend.core.domain_types import Category, Post, ViewName


@dataclass(frozen=True)
class SidebarData:
    """Category list + recent posts shown beside every page."""
    categories: list[Category] = field(default_factory=list)
    recent_posts: list[Post] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "SidebarData":
        return cls()


@dataclass(frozen=True)
class PageContext:
    title: str
    sidebar: SidebarData = field(default_factory=SidebarData)
    posts: list[Post] | None = None
    post: Post | None = None
    category: Category | None = None
    current_page: int | None = None
    total_pages: int | None = None
    message: str | None = None

    def __post_init__(self):
        if self.current_page is not None and self.current_page < 1:
            raise ValueError(f"current_page must be >= 1, got {self.current_page}")
        if self.total_pages is not None and self.total_pages < 1:
            raise ValueError(f"total_pages must be >= 1, got {self.total_pages}")

    def to_template_context(self) -> dict:
        """Renderer data bag (keys per the renderer contract)."""
        ctx: dict = {
            "title": self.title,
            "categories": self.sidebar.categories,
            "recentPosts": self.sidebar.recent_posts,
        }
        optional = {
            "posts": self.posts,
            "post": self.post,
            "category": self.category,
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "message": self.message,
        }
        ctx.update({k: v for k, v in optional.items() if v is not None})
        return ctx


@dataclass(frozen=True)
class ViewResult:
    """What a resolver decided: which view, with what data, under which status."""
    view: ViewName
    context: PageContext
    status_code: int = 200


def error_view(
    message: str,
    title: str = "Error",
    status_code: int = 500,
    sidebar: SidebarData | None = None,
) -> ViewResult:
    """Error view; sidebar lists stay empty unless the caller already has them."""
    return ViewResult(
        view=ViewName.ERROR,
        context=PageContext(
            title=title, sidebar=sidebar or SidebarData.empty(), message=message,
        ),
        status_code=status_code,
    )
