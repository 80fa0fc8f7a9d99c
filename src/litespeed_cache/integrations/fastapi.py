"""
FastAPI integration for litespeed_cache.

Provides a middleware that gives each request its own LitespeedCache and a
dependency to reach it from route handlers.
"""
from typing import Any, Callable, MutableMapping, Optional
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..cache import CACHING_HEADERS, LitespeedCache
from ..config import get_settings
from ..context import has_bypass_cookie, is_ajax_request
from ..directives import PURGE_HEADER
from ..types import CacheConfig, DEFAULT_BYPASS_COOKIE_NAME, RequestContext

logger = logging.getLogger(__name__)

STATE_ATTRIBUTE = "litespeed_cache"


def request_context_from_request(
    request: Request,
    bypass_cookie_name: str = DEFAULT_BYPASS_COOKIE_NAME,
    force_interactive: bool = False,
) -> RequestContext:
    """
    Build a RequestContext from a Starlette/FastAPI request.

    Args:
        request: The incoming request.
        bypass_cookie_name: Cookie that disables caching when set to '1'.
        force_interactive: Test-harness override, see RequestContext.

    Returns:
        A RequestContext marked as interactive.
    """
    return RequestContext(
        method=request.method or None,
        is_ajax=is_ajax_request(request.headers),
        has_bypass_cookie=has_bypass_cookie(request.cookies, bypass_cookie_name),
        is_interactive=True,
        force_interactive=force_interactive,
        path=request.url.path or "",
        query_string=request.url.query or "",
    )


def apply_headers(cache: LitespeedCache, target: MutableMapping[str, str]) -> None:
    """Copy the headers emitted by cache onto a response's headers."""
    if PURGE_HEADER in cache.headers:
        for name in CACHING_HEADERS:
            if name in target:
                del target[name]
    for name, value in cache.headers.items():
        target[name] = value


def _default_config_factory() -> CacheConfig:
    return get_settings().to_cache_config()


class LitespeedCacheMiddleware(BaseHTTPMiddleware):
    """
    Attach a LitespeedCache to every request and emit its headers on the response.

    Example:
        app = FastAPI()
        app.add_middleware(
            LitespeedCacheMiddleware,
            config_factory=lambda: CacheConfig(excluded_urls=["admin/*"]),
        )

        @app.get("/articles")
        async def articles(cache: LitespeedCache = Depends(get_litespeed_cache)):
            cache.add_tags("articles").cache()
            return [...]
    """

    def __init__(
        self,
        app: Any,
        config_factory: Optional[Callable[[], CacheConfig]] = None,
        force_interactive: bool = False,
    ) -> None:
        super().__init__(app)
        self._config_factory = config_factory or _default_config_factory
        self._force_interactive = force_interactive

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Fresh config per request; facade setters mutate it.
        config = self._config_factory()
        context = request_context_from_request(
            request,
            bypass_cookie_name=config.bypass_cookie_name,
            force_interactive=self._force_interactive,
        )
        cache = LitespeedCache(config, context)
        setattr(request.state, STATE_ATTRIBUTE, cache)

        response = await call_next(request)

        if cache.headers:
            apply_headers(cache, response.headers)
            logger.debug(f"LiteSpeed headers for {request.url.path}: {dict(cache.headers)}")
        return response


def get_litespeed_cache(request: Request) -> LitespeedCache:
    """
    FastAPI dependency returning the request's LitespeedCache.

    Raises:
        RuntimeError: If LitespeedCacheMiddleware is not installed.
    """
    cache = getattr(request.state, STATE_ATTRIBUTE, None)
    if cache is None:
        raise RuntimeError("LitespeedCacheMiddleware is not installed")
    return cache
