"""
Types for LiteSpeed cache directive handling.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .errors import ConfigurationError


CONTROL_HEADER = "X-LiteSpeed-Cache-Control"
VARY_HEADER = "X-LiteSpeed-Vary"
PURGE_HEADER = "X-LiteSpeed-Purge"
TAG_HEADER = "X-LiteSpeed-Tag"

DEFAULT_LIFETIME_SECONDS = 120 * 60
DEFAULT_BYPASS_COOKIE_NAME = "cache_bypass"
DEFAULT_CACHEABLE_METHODS = ["GET", "HEAD"]


class CacheType(str, Enum):
    """Cache visibility for X-LiteSpeed-Cache-Control."""

    PUBLIC = "public"
    PRIVATE = "private"

    @classmethod
    def parse(cls, value: Union[str, "CacheType"]) -> "CacheType":
        """Coerce a string into a CacheType, raising ConfigurationError on anything else."""
        if isinstance(value, CacheType):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ConfigurationError(
            f"Unsupported cache type {value!r}, expected one of: "
            + ", ".join(t.value for t in cls),
            value=value,
        )


class ExclusionReason(str, Enum):
    """Which rule of the decision chain excluded a request."""

    DISABLED = "disabled"
    ZERO_LIFETIME = "zero-lifetime"
    AJAX = "ajax"
    METHOD = "method-not-cacheable"
    BYPASS_COOKIE = "bypass-cookie"
    NON_INTERACTIVE = "non-interactive"
    EXCLUDED_URL = "excluded-url"
    EXCLUDED_QUERY_STRING = "excluded-query-string"


def validate_lifetime(lifetime: Any) -> int:
    """Return lifetime if it is a non-negative int, else raise ConfigurationError."""
    if isinstance(lifetime, bool) or not isinstance(lifetime, int) or lifetime < 0:
        raise ConfigurationError(
            f"Cache lifetime must be >= 0 seconds, got {lifetime!r}", value=lifetime
        )
    return lifetime


def as_list(value: Any) -> List[str]:
    """Coerce None, a single string, or an iterable of strings into a list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


@dataclass
class CacheConfig:
    """Cache policy configuration."""

    enabled: bool = True
    """Whether caching is enabled at all. Default: True."""

    lifetime: int = DEFAULT_LIFETIME_SECONDS
    """max-age in seconds. 0 means never cache. Default: 7200 (120 minutes)."""

    cache_type: CacheType = CacheType.PUBLIC
    """public or private. Default: public."""

    esi_enabled: bool = False
    """Whether to add esi=on to the control header. Default: False."""

    bypass_cookie_name: str = DEFAULT_BYPASS_COOKIE_NAME
    """Cookie (and query parameter) that disables caching when set to 1."""

    excluded_urls: List[str] = field(default_factory=list)
    """URL path patterns that are never cached. Supports * wildcards."""

    excluded_query_strings: List[str] = field(default_factory=list)
    """Query string patterns that are never cached. Supports * wildcards."""

    ajax_cacheable: bool = False
    """Whether XMLHttpRequest requests may be cached. Default: False."""

    cacheable_methods: List[str] = field(
        default_factory=lambda: list(DEFAULT_CACHEABLE_METHODS)
    )
    """Request methods eligible for caching. Default: ['GET', 'HEAD']."""

    def __post_init__(self) -> None:
        self.cache_type = CacheType.parse(self.cache_type)
        self.lifetime = validate_lifetime(self.lifetime)
        self.excluded_urls = as_list(self.excluded_urls)
        self.excluded_query_strings = as_list(self.excluded_query_strings)
        self.cacheable_methods = as_list(self.cacheable_methods)


@dataclass(frozen=True)
class RequestContext:
    """
    Per-request facts the decision engine needs.

    Built once per request by the host layer and never mutated.
    """

    method: Optional[str] = None
    """Request method. None or empty means unknown."""

    is_ajax: bool = False
    """Request carried X-Requested-With: XMLHttpRequest."""

    has_bypass_cookie: bool = False
    """The bypass cookie is present and equal to '1'."""

    is_interactive: bool = False
    """Running inside a live HTTP request (False for CLI / background jobs)."""

    force_interactive: bool = False
    """Test-harness override: act as interactive and ignore the bypass cookie."""

    path: str = ""
    """URL path of the request."""

    query_string: str = ""
    """Raw query string of the request, without the leading '?'."""

    @property
    def interactive(self) -> bool:
        return self.is_interactive or self.force_interactive


@dataclass
class DirectiveSet:
    """Tags, vary values and purge URI accumulated for the current response."""

    tags: List[str] = field(default_factory=list)
    vary: List[str] = field(default_factory=list)
    uri: Optional[str] = None

    def add_tags(self, tags: Union[str, List[str]]) -> None:
        self.tags.extend(as_list(tags))

    def add_tag(self, tag: str) -> None:
        self.tags.append(tag)

    def add_vary(self, values: Union[str, List[str]]) -> None:
        self.vary.extend(as_list(values))

    def clear(self) -> None:
        self.tags.clear()
        self.vary.clear()
        self.uri = None


@dataclass
class CacheDirectives:
    """Encoded cache headers for a cacheable response."""

    control: str
    """X-LiteSpeed-Cache-Control value."""

    vary: Optional[str] = None
    """X-LiteSpeed-Vary value, None when no vary values were added."""

    tag: Optional[str] = None
    """X-LiteSpeed-Tag value, None when no tags were added."""

    def to_headers(self) -> Dict[str, str]:
        """Header name to value, omitting absent headers."""
        headers = {CONTROL_HEADER: self.control}
        if self.vary is not None:
            headers[VARY_HEADER] = self.vary
        if self.tag is not None:
            headers[TAG_HEADER] = self.tag
        return headers
