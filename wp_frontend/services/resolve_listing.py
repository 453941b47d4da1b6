"""Listing Resolver — home page and its paginated pages.

Invariants:
    - Posts page and sidebar fetched concurrently; a failed posts fetch cancels the sidebar
    - currentPage >= 1, totalPages >= 1 (core/pagination.py)
    - Non-list posts payload is a failure (500), not an empty listing
    - Never raises: every failure becomes the 500 error view
"""

import logging

from wp_frontend.core.domain_types import POSTS_PER_PAGE, ViewName
from wp_frontend.core.errors import UpstreamError, UpstreamShapeError
from wp_frontend.core.pagination import parse_page_number, parse_total_pages
from wp_frontend.core.upstream_protocols import UpstreamClient
from wp_frontend.core.view_context import PageContext, ViewResult, error_view
from wp_frontend.schemas.wordpress import decode_entity_list
from wp_frontend.services.sidebar import fetch_with_sidebar

logger = logging.getLogger(__name__)

LISTING_ERROR = "Could not fetch posts. Please check the API connection."


async def resolve_listing(
    client: UpstreamClient, page_number: str | None, site_title: str,
) -> ViewResult:
    current_page = 1
    try:
        current_page = parse_page_number(page_number)
        posts_res, sidebar = await fetch_with_sidebar(
            client,
            client.get(
                "/posts", params={"per_page": POSTS_PER_PAGE, "page": current_page},
            ),
        )
        total_pages = parse_total_pages(posts_res.headers)
        posts = decode_entity_list(posts_res.data)
        if posts is None:
            raise UpstreamShapeError("Invalid post data structure received from API.")
    except UpstreamError as e:
        logger.error(
            f"Error on home route: {e.message}",
            extra={"route": "listing", "page": current_page, "error_code": e.code},
        )
        return error_view(LISTING_ERROR)
    except Exception as e:
        logger.error(
            f"Unexpected error on home route: {e}",
            extra={"route": "listing", "page": current_page}, exc_info=True,
        )
        return error_view(LISTING_ERROR)

    return ViewResult(
        view=ViewName.LISTING,
        context=PageContext(
            title=site_title,
            sidebar=sidebar,
            posts=posts,
            current_page=current_page,
            total_pages=total_pages,
        ),
    )
