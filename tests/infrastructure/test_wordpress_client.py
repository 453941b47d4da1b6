"""WordPress Client — URL binding, auth modes, and error mapping over httpx.MockTransport.

Tests:
    - Paths resolve under {WP_URL}/wp-json/wp/v2
    - Authorization: Bearer sent only in Authenticated Mode
    - Boolean params sent as true/false
    - Connect error -> UpstreamUnavailableError, timeout -> timed_out=True
    - Non-2xx -> UpstreamStatusError, non-JSON -> UpstreamShapeError
    - Response headers (x-wp-totalpages) returned to the caller
"""

import httpx
import pytest

from wp_frontend.core.domain_types import ApiMode
from wp_frontend.core.errors import (
    UpstreamShapeError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)
import wp_frontend.infrastructure.wordpress_client as client_module
from wp_frontend.infrastructure.wordpress_client import WordPressClient

BASE = "http://wp.test/wp-json/wp/v2"


def _client(handler, api_key=None) -> WordPressClient:
    return WordPressClient(
        BASE, api_key=api_key, timeout_seconds=1.0,
        transport=httpx.MockTransport(handler),
    )


async def test_get_resolves_under_api_namespace():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1}], headers={"X-WP-TotalPages": "3"})

    wp = _client(handler)
    res = await wp.get("/posts", params={"per_page": 10, "page": 2})
    await wp.aclose()

    assert str(seen[0].url) == f"{BASE}/posts?per_page=10&page=2"
    assert res.data == [{"id": 1}]
    assert res.headers["x-wp-totalpages"] == "3"


async def test_boolean_params_encoded_lowercase():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    wp = _client(handler)
    await wp.get("/categories", params={"per_page": 20, "hide_empty": True})
    await wp.aclose()

    assert seen[0].url.params["hide_empty"] == "true"


async def test_public_mode_sends_no_authorization():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    wp = _client(handler)
    await wp.get("/posts")
    await wp.aclose()

    assert wp.mode is ApiMode.PUBLIC
    assert "authorization" not in seen[0].headers


async def test_authenticated_mode_sends_bearer_token():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    wp = _client(handler, api_key="s3cret")
    await wp.get("/posts")
    await wp.aclose()

    assert wp.mode is ApiMode.AUTHENTICATED
    assert seen[0].headers["authorization"] == "Bearer s3cret"


async def test_connect_error_maps_to_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    wp = _client(handler)
    with pytest.raises(UpstreamUnavailableError) as exc_info:
        await wp.get("/posts")
    await wp.aclose()
    assert exc_info.value.timed_out is False
    assert exc_info.value.context.upstream_path == "/posts"


async def test_timeout_maps_to_unavailable_with_timeout_flag():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    wp = _client(handler)
    with pytest.raises(UpstreamUnavailableError) as exc_info:
        await wp.get("/posts")
    await wp.aclose()
    assert exc_info.value.timed_out is True
    assert exc_info.value.code == "UPSTREAM_TIMEOUT"


@pytest.mark.parametrize("status", [400, 401, 404, 500, 503])
async def test_non_2xx_maps_to_status_error(status):
    wp = _client(lambda request: httpx.Response(status, json={"code": "err"}))
    with pytest.raises(UpstreamStatusError) as exc_info:
        await wp.get("/posts")
    await wp.aclose()
    assert exc_info.value.status_code == status


async def test_non_json_body_maps_to_shape_error():
    wp = _client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
    with pytest.raises(UpstreamShapeError):
        await wp.get("/posts")
    await wp.aclose()


async def test_health_check_reports_reachability():
    up = _client(lambda request: httpx.Response(200, json={"namespace": "wp/v2"}))
    assert await up.health_check() is True
    await up.aclose()

    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    down = _client(refuse)
    assert await down.health_check() is False
    await down.aclose()

    broken = _client(lambda request: httpx.Response(500))
    assert await broken.health_check() is False
    await broken.aclose()


async def test_singleton_lifecycle():
    assert client_module.wp_client is None
    with pytest.raises(RuntimeError):
        client_module.get_wp_client()

    created = client_module.init_client(BASE, api_key=None, timeout_seconds=1.0)
    assert client_module.get_wp_client() is created

    await client_module.close_client()
    assert client_module.wp_client is None
