"""Sidebar Aggregator — categories + recent posts for every page, failure-isolated.

Invariants:
    - Exactly two upstream calls, issued concurrently
    - Returns both lists or neither: any failure -> SidebarData.empty(), never partial
    - Never raises: sidebar unavailability degrades the page, it doesn't fail it
    - fetch_with_sidebar(): sidebar never outlives a failed primary fetch

Design Decisions:
    - gather(return_exceptions=True): both calls always settle, so a second failure
      is never left as an unretrieved task exception
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from wp_frontend.core.domain_types import SIDEBAR_CATEGORY_LIMIT, SIDEBAR_RECENT_POSTS
from wp_frontend.core.errors import UpstreamShapeError
from wp_frontend.core.upstream_protocols import UpstreamClient
from wp_frontend.core.view_context import SidebarData
from wp_frontend.schemas.wordpress import decode_entity_list

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def get_sidebar_data(client: UpstreamClient) -> SidebarData:
    categories_res, posts_res = await asyncio.gather(
        client.get(
            "/categories",
            params={"per_page": SIDEBAR_CATEGORY_LIMIT, "hide_empty": True},
        ),
        client.get("/posts", params={"per_page": SIDEBAR_RECENT_POSTS}),
        return_exceptions=True,
    )
    try:
        categories = _unwrap(categories_res)
        recent_posts = _unwrap(posts_res)
    except Exception as e:
        logger.error(f"Error fetching sidebar data: {e}")
        return SidebarData.empty()
    return SidebarData(categories=categories, recent_posts=recent_posts)


def _unwrap(result) -> list:
    if isinstance(result, BaseException):
        raise result
    entities = decode_entity_list(result.data)
    if entities is None:
        raise UpstreamShapeError("sidebar payload is not a list")
    return entities


async def fetch_with_sidebar(
    client: UpstreamClient, primary: Awaitable[T],
) -> tuple[T, SidebarData]:
    """Await primary while the sidebar loads; a failed primary cancels the sidebar."""
    sidebar_task = asyncio.create_task(get_sidebar_data(client))
    try:
        result = await primary
    except BaseException:
        sidebar_task.cancel()
        raise
    return result, await sidebar_task
