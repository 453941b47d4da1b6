"""Single-Item Resolver — post by slug with embedded data.

Invariants:
    - Request carries slug and _embed=True; sidebar fetched alongside
    - Zero matches (or non-list) -> 404, sidebar kept, no post keys
    - One match -> title == match.title.rendered
    - Fetch failure -> 500, generic message, in-flight sidebar calls cancelled
"""

import asyncio

import pytest

from wp_frontend.core.domain_types import ViewName
from wp_frontend.core.errors import UpstreamShapeError, UpstreamStatusError
from wp_frontend.services.resolve_post import POST_ERROR, POST_NOT_FOUND, resolve_post

from tests.mock_wordpress import (
    FakeWordPressClient,
    StalledSidebarClient,
    make_post,
    network_error,
    ok,
    settle,
)


async def test_found_post_renders_single_item():
    post = make_post(7, slug="hello-world")
    post["_embedded"] = {"author": [{"name": "Ada"}]}
    wp = FakeWordPressClient().with_sidebar().on(
        "/posts", ok([post]), slug="hello-world",
    )

    result = await resolve_post(wp, "hello-world")

    assert result.view is ViewName.SINGLE_ITEM
    assert result.status_code == 200
    ctx = result.context.to_template_context()
    assert ctx["post"] is post
    assert ctx["title"] == "Post 7"
    assert len(ctx["recentPosts"]) == 5
    assert "posts" not in ctx


async def test_requests_embedded_data_by_slug():
    wp = FakeWordPressClient().with_sidebar().on(
        "/posts", ok([make_post(1)]), slug="a",
    )

    await resolve_post(wp, "a")

    assert wp.calls_to("/posts", slug="a") == [{"slug": "a", "_embed": True}]


async def test_first_match_wins():
    first, second = make_post(1, slug="dup"), make_post(2, slug="dup")
    wp = FakeWordPressClient().with_sidebar().on("/posts", ok([first, second]), slug="dup")

    result = await resolve_post(wp, "dup")

    assert result.context.post is first


@pytest.mark.parametrize("payload", [[], {"code": "rest_no_route"}])
async def test_no_match_is_404_with_sidebar(payload):
    wp = FakeWordPressClient().with_sidebar().on("/posts", ok(payload), slug="unknown")

    result = await resolve_post(wp, "unknown")

    assert result.view is ViewName.ERROR
    assert result.status_code == 404
    ctx = result.context.to_template_context()
    assert ctx["message"] == POST_NOT_FOUND
    assert ctx["title"] == "Post Not Found"
    assert len(ctx["categories"]) == 2
    assert "post" not in ctx
    assert "posts" not in ctx


@pytest.mark.parametrize("error", [
    network_error(), UpstreamStatusError(502), UpstreamShapeError("not json"),
])
async def test_fetch_failure_is_500(error):
    wp = FakeWordPressClient().with_sidebar().on("/posts", error, slug="x")

    result = await resolve_post(wp, "x")

    assert result.status_code == 500
    assert result.context.message == POST_ERROR
    assert result.context.sidebar.categories == []


async def test_fetch_failure_cancels_sidebar():
    wp = StalledSidebarClient().on("/posts", network_error(), slug="x")

    result = await asyncio.wait_for(resolve_post(wp, "x"), timeout=1)
    await settle()

    assert result.status_code == 500
    assert sorted(wp.cancelled) == ["/categories", "/posts"]


async def test_post_without_title_is_500():
    wp = FakeWordPressClient().with_sidebar().on("/posts", ok([{"id": 1}]), slug="x")

    result = await resolve_post(wp, "x")

    assert result.status_code == 500
