"""Taxonomy-Archive Resolver — posts of one category, paginated.

Invariants:
    - Sidebar and category lookup run concurrently; the posts fetch waits on the lookup
    - A failed lookup cancels the sidebar: no upstream work outlives the request
    - Posts are filtered by the resolved category id, never by its slug
    - Unknown slug -> 404 view with sidebar data
    - Any other failure (lookup, posts fetch, payload shape) -> 500 view
    - Never raises

Design Decisions:
    - Lookup and sidebar have no ordering dependency, so both start immediately;
      a failed lookup cancels the sidebar before it can log anything
"""

import logging

from pydantic import ValidationError

from wp_frontend.core.domain_types import POSTS_PER_PAGE, ViewName
from wp_frontend.core.errors import (
    ResourceNotFoundError,
    UpstreamError,
    UpstreamShapeError,
)
from wp_frontend.core.pagination import parse_page_number, parse_total_pages
from wp_frontend.core.upstream_protocols import UpstreamClient
from wp_frontend.core.view_context import (
    PageContext,
    SidebarData,
    ViewResult,
    error_view,
)
from wp_frontend.schemas.wordpress import CategoryRef, decode_entity_list
from wp_frontend.services.sidebar import fetch_with_sidebar

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "The category you were looking for could not be found."
CATEGORY_ERROR = "Could not fetch posts for this category."


async def resolve_category(
    client: UpstreamClient, slug: str, page_number: str | None,
) -> ViewResult:
    sidebar = SidebarData.empty()
    log_extra = {"route": "archive", "slug": slug, "page": None}
    try:
        current_page = parse_page_number(page_number)
        log_extra["page"] = current_page
        category_res, sidebar = await fetch_with_sidebar(
            client, client.get("/categories", params={"slug": slug}),
        )
        category = _first_category(category_res.data, slug)
        ref = CategoryRef.model_validate(category)

        posts_res = await client.get(
            "/posts",
            params={
                "categories": ref.id,
                "per_page": POSTS_PER_PAGE,
                "page": current_page,
            },
        )
        total_pages = parse_total_pages(posts_res.headers)
        posts = decode_entity_list(posts_res.data)
        if posts is None:
            raise UpstreamShapeError("Invalid post data structure received from API.")
    except ResourceNotFoundError as e:
        logger.info(e.message, extra=log_extra)
        return error_view(
            CATEGORY_NOT_FOUND, title="Category Not Found",
            status_code=404, sidebar=sidebar,
        )
    except UpstreamError as e:
        logger.error(
            f"Error on category archive route: {e.message}",
            extra={**log_extra, "error_code": e.code},
        )
        return error_view(CATEGORY_ERROR)
    except ValidationError as e:
        logger.error(
            f"Error on category archive route: malformed category: {e}",
            extra=log_extra,
        )
        return error_view(CATEGORY_ERROR)
    except Exception as e:
        logger.error(
            f"Unexpected error on category archive route: {e}",
            extra=log_extra, exc_info=True,
        )
        return error_view(CATEGORY_ERROR)

    return ViewResult(
        view=ViewName.ARCHIVE,
        context=PageContext(
            title=f"Category: {ref.name}",
            sidebar=sidebar,
            posts=posts,
            category=category,
            current_page=current_page,
            total_pages=total_pages,
        ),
    )


def _first_category(data, slug: str) -> dict:
    matches = decode_entity_list(data)
    if not matches:
        raise ResourceNotFoundError("Category", slug)
    return matches[0]
