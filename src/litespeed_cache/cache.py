"""
Fluent LiteSpeed cache facade for a single response.
"""
import logging
from typing import List, MutableMapping, Optional, Union

from .context import with_url
from .directives import (
    CONTROL_HEADER,
    PURGE_HEADER,
    TAG_HEADER,
    VARY_HEADER,
    build_cache_control,
    build_cache_directives,
    build_cookie_vary,
    build_purge_all,
    build_purge_directive,
)
from .engine import exclusion_reason, is_excluded_query_string, is_excluded_url
from .types import (
    CacheConfig,
    CacheType,
    DirectiveSet,
    ExclusionReason,
    RequestContext,
    as_list,
    validate_lifetime,
)

logger = logging.getLogger(__name__)

CACHING_HEADERS = (CONTROL_HEADER, VARY_HEADER, TAG_HEADER)


class LitespeedCache:
    """
    Decide whether the current response may be cached and emit LiteSpeed headers.

    Headers are written to `headers`, any mutable mapping of header name to
    value (a dict by default, or a Starlette response's headers).

    Example:
        cache = LitespeedCache(context=build_request_context("GET", "/blog?page=2"))
        cache.set_excluded_urls(["admin/*"]).add_tags(["articles", "pages"]).cache()
        response.headers.update(cache.headers)

        # On content change
        LitespeedCache(context=context).purge_tags("articles")
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        context: Optional[RequestContext] = None,
        headers: Optional[MutableMapping[str, str]] = None,
    ) -> None:
        self._config = config or CacheConfig()
        self._context = context or RequestContext()
        self._headers: MutableMapping[str, str] = headers if headers is not None else {}
        self._directives = DirectiveSet()

    @property
    def config(self) -> CacheConfig:
        return self._config

    @property
    def context(self) -> RequestContext:
        return self._context

    @property
    def headers(self) -> MutableMapping[str, str]:
        """Headers emitted so far."""
        return self._headers

    # Policy

    def enabled(self) -> bool:
        return self._config.enabled

    def enable(self) -> "LitespeedCache":
        self._config.enabled = True
        return self

    def disable(self) -> "LitespeedCache":
        self._config.enabled = False
        return self

    def get_type(self) -> CacheType:
        return self._config.cache_type

    def set_type(self, cache_type: Union[str, CacheType]) -> "LitespeedCache":
        """
        Set public or private caching.

        Raises:
            ConfigurationError: If cache_type is anything else. State is left untouched.
        """
        self._config.cache_type = CacheType.parse(cache_type)
        return self

    def get_lifetime(self) -> int:
        return self._config.lifetime

    def set_lifetime(self, lifetime: int) -> "LitespeedCache":
        """Set max-age in seconds. 0 disables caching."""
        self._config.lifetime = validate_lifetime(lifetime)
        return self

    def esi_enabled(self) -> bool:
        return self._config.esi_enabled

    def set_esi_enabled(self, enabled: bool = True) -> "LitespeedCache":
        self._config.esi_enabled = enabled
        return self

    def set_bypass_cookie_name(self, name: str) -> "LitespeedCache":
        self._config.bypass_cookie_name = name
        return self

    def set_ajax_cacheable(self, cacheable: bool = True) -> "LitespeedCache":
        self._config.ajax_cacheable = cacheable
        return self

    def set_cacheable_methods(self, methods: Union[str, List[str]]) -> "LitespeedCache":
        self._config.cacheable_methods = as_list(methods)
        return self

    def get_excluded_urls(self) -> List[str]:
        return self._config.excluded_urls

    def set_excluded_urls(self, urls: Union[str, List[str]]) -> "LitespeedCache":
        self._config.excluded_urls = as_list(urls)
        return self

    def get_excluded_query_strings(self) -> List[str]:
        return self._config.excluded_query_strings

    def set_excluded_query_strings(
        self, query_strings: Union[str, List[str]]
    ) -> "LitespeedCache":
        self._config.excluded_query_strings = as_list(query_strings)
        return self

    # Accumulated directives

    def add_tags(self, tags: Union[str, List[str]]) -> "LitespeedCache":
        self._directives.add_tags(tags)
        return self

    def add_tag(self, tag: str) -> "LitespeedCache":
        self._directives.add_tag(tag)
        return self

    def get_tags(self) -> List[str]:
        return list(self._directives.tags)

    def add_vary(self, values: Union[str, List[str]]) -> "LitespeedCache":
        self._directives.add_vary(values)
        return self

    def get_vary(self) -> List[str]:
        return list(self._directives.vary)

    def add_uri(self, uri: str) -> "LitespeedCache":
        """Set the URI that purge() invalidates."""
        self._directives.uri = uri
        return self

    def get_uri(self) -> Optional[str]:
        return self._directives.uri

    # Decisions

    def is_in_excluded_urls(self, path: str = "") -> bool:
        return is_excluded_url(self._config, path)

    def is_in_excluded_query_strings(self, query_string: str = "") -> bool:
        return is_excluded_query_string(self._config, query_string)

    def exclusion_reason(self, url: Optional[str] = None) -> Optional[ExclusionReason]:
        return exclusion_reason(self._config, with_url(self._context, url))

    def should_cache(self, url: Optional[str] = None) -> bool:
        """Check the rule chain for the current request, or for url if given."""
        return self.exclusion_reason(url) is None

    # Emission

    def cache(
        self,
        cache_type: Union[str, CacheType, None] = None,
        lifetime: Optional[int] = None,
        url: Optional[str] = None,
    ) -> "LitespeedCache":
        """
        Emit cache-control, vary and tag headers if the request is cacheable.

        Args:
            cache_type: Per-call type override.
            lifetime: Per-call max-age override in seconds.
            url: URL to evaluate instead of the context's path and query.

        Raises:
            ConfigurationError: If cache_type is not public or private,
                or lifetime is negative.
        """
        if cache_type is not None:
            cache_type = CacheType.parse(cache_type)
        if lifetime is not None:
            validate_lifetime(lifetime)

        reason = self.exclusion_reason(url)
        if reason is not None:
            logger.debug(f"Response not cached: {reason.value}")
            return self

        directives = build_cache_directives(
            self._config, self._directives, lifetime=lifetime, cache_type=cache_type
        )
        for name, value in directives.to_headers().items():
            self._headers[name] = value
        logger.debug(f"Response cached: {directives.control}")
        return self

    def set_cache_control_header(
        self,
        cache_type: Union[str, CacheType, None] = None,
        lifetime: Optional[int] = None,
    ) -> "LitespeedCache":
        """Emit X-LiteSpeed-Cache-Control without running the rule chain."""
        self._headers[CONTROL_HEADER] = build_cache_control(
            self._config.cache_type if cache_type is None else cache_type,
            self._config.lifetime if lifetime is None else lifetime,
            self._config.esi_enabled,
        )
        return self

    def set_cache_cookie_header(self, cookie_name: str) -> "LitespeedCache":
        """Emit X-LiteSpeed-Vary: cookie=<cookie_name>."""
        self._headers[VARY_HEADER] = build_cookie_vary(cookie_name)
        return self

    def purge(self) -> "LitespeedCache":
        """Purge the URI from add_uri() and the accumulated tags."""
        return self._emit_purge(
            build_purge_directive(self._directives.uri, self._directives.tags)
        )

    def purge_all(self) -> "LitespeedCache":
        """Purge every cached object."""
        return self._emit_purge(build_purge_all())

    def purge_cache(self) -> "LitespeedCache":
        """Deprecated alias of purge_all()."""
        return self.purge_all()

    def purge_tags(self, tags: Union[str, List[str]]) -> "LitespeedCache":
        return self._emit_purge(build_purge_directive(tags=tags))

    def purge_uri(self, uri: str) -> "LitespeedCache":
        return self._emit_purge(build_purge_directive(uri=uri))

    def _emit_purge(self, value: str) -> "LitespeedCache":
        if not self._context.interactive:
            logger.warning("Purge skipped: not running inside an HTTP request")
            return self
        if not value:
            return self

        self._clear_caching_headers()
        self._headers[PURGE_HEADER] = value
        logger.info(f"Purging LiteSpeed cache: {value!r}")
        return self

    def _clear_caching_headers(self) -> None:
        for name in CACHING_HEADERS:
            if name in self._headers:
                del self._headers[name]


def create_litespeed_cache(
    config: Optional[CacheConfig] = None,
    context: Optional[RequestContext] = None,
    headers: Optional[MutableMapping[str, str]] = None,
) -> LitespeedCache:
    """Create a LitespeedCache instance."""
    return LitespeedCache(config, context, headers)
