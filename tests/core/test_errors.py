"""Error Hierarchy — codes, statuses, and the UpstreamError family.

Tests:
    - All upstream variants are UpstreamError (resolvers catch one type)
    - Not-found is 404 and NOT an UpstreamError
    - ErrorContext records the failing upstream path and params
"""

from wp_frontend.core.errors import (
    ErrorCategory,
    ErrorContext,
    ResourceNotFoundError,
    UpstreamError,
    UpstreamShapeError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)


def test_upstream_variants_share_base():
    for err in (
        UpstreamUnavailableError("down"),
        UpstreamStatusError(500),
        UpstreamShapeError("not a list"),
    ):
        assert isinstance(err, UpstreamError)


def test_not_found_is_distinct_from_upstream_failure():
    err = ResourceNotFoundError("Post", "hello-world")
    assert not isinstance(err, UpstreamError)
    assert err.http_status == 404
    assert err.message == "Post 'hello-world' not found"


def test_timeout_is_categorized_separately():
    err = UpstreamUnavailableError("slow", timed_out=True)
    assert err.code == "UPSTREAM_TIMEOUT"
    assert err.category is ErrorCategory.TIMEOUT
    assert UpstreamUnavailableError("down").code == "UPSTREAM_UNAVAILABLE"


def test_status_error_keeps_status_code():
    err = UpstreamStatusError(401)
    assert err.status_code == 401
    assert "401" in err.message


def test_context_records_upstream_call():
    err = UpstreamStatusError(
        500, context=ErrorContext(upstream_path="/posts", params={"page": 2}),
    )
    assert err.code == "UPSTREAM_STATUS"
    assert err.category is ErrorCategory.EXTERNAL_API
    assert err.context.upstream_path == "/posts"
    assert err.context.params == {"page": 2}


def test_context_defaults_when_omitted():
    err = UpstreamShapeError("not a list")
    assert err.context.upstream_path is None
    assert err.context.timestamp.tzinfo is not None
