"""Single-Item Resolver — one post by slug, with embedded author/media.

Invariants:
    - Post lookup and sidebar fetched concurrently; a failed lookup cancels the sidebar
    - _embed requested only here: listing/archive never pay for author/media payload
    - Empty or non-list result -> 404 view with sidebar data, no post keys
    - Fetch failure (not empty result) -> 500 view
    - Never raises
"""

import logging

from wp_frontend.core.domain_types import ViewName
from wp_frontend.core.errors import ResourceNotFoundError, UpstreamError
from wp_frontend.core.upstream_protocols import UpstreamClient
from wp_frontend.core.view_context import PageContext, ViewResult, error_view
from wp_frontend.schemas.wordpress import decode_entity_list
from wp_frontend.services.sidebar import fetch_with_sidebar

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "The post you were looking for could not be found."
POST_ERROR = "Could not fetch the post. Please check the API connection."


async def resolve_post(client: UpstreamClient, slug: str) -> ViewResult:
    try:
        post_res, sidebar = await fetch_with_sidebar(
            client, client.get("/posts", params={"slug": slug, "_embed": True}),
        )
        matches = decode_entity_list(post_res.data)
        if not matches:
            raise ResourceNotFoundError("Post", slug)
        post = matches[0]
        title = _rendered_title(post)
    except ResourceNotFoundError as e:
        logger.info(e.message, extra={"route": "single-item", "slug": slug})
        return error_view(
            POST_NOT_FOUND, title="Post Not Found", status_code=404, sidebar=sidebar,
        )
    except UpstreamError as e:
        logger.error(
            f"Error on single post route: {e.message}",
            extra={"route": "single-item", "slug": slug, "error_code": e.code},
        )
        return error_view(POST_ERROR)
    except Exception as e:
        logger.error(
            f"Unexpected error on single post route: {e}",
            extra={"route": "single-item", "slug": slug}, exc_info=True,
        )
        return error_view(POST_ERROR)

    return ViewResult(
        view=ViewName.SINGLE_ITEM,
        context=PageContext(title=title, sidebar=sidebar, post=post),
    )


def _rendered_title(post: dict) -> str:
    title = post["title"]
    if isinstance(title, dict):
        return title["rendered"]
    return str(title)
