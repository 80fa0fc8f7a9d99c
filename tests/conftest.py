"""Pytest configuration for litespeed_cache tests."""
import pytest

from litespeed_cache import CacheConfig, LitespeedCache, RequestContext


@pytest.fixture
def web_context():
    """Context of a plain GET request served over HTTP."""
    return RequestContext(
        method="GET",
        is_interactive=True,
        path="/test",
        query_string="foo=bar",
    )


@pytest.fixture
def cli_context():
    """Context of a command-line or background job."""
    return RequestContext(path="/test", query_string="foo=bar")


@pytest.fixture
def forced_context():
    """Non-interactive context forced to behave as a live request."""
    return RequestContext(force_interactive=True, path="/test", query_string="foo=bar")


@pytest.fixture
def cache(web_context):
    """LitespeedCache for a cacheable GET request."""
    return LitespeedCache(CacheConfig(), web_context)
