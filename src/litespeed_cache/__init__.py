"""
LiteSpeed cache directive headers.

Decides whether a response may be cached by LiteSpeed Web Server and emits
X-LiteSpeed-Cache-Control, X-LiteSpeed-Vary, X-LiteSpeed-Tag and
X-LiteSpeed-Purge values.
"""
from .errors import ConfigurationError
from .types import (
    CONTROL_HEADER,
    VARY_HEADER,
    PURGE_HEADER,
    TAG_HEADER,
    CacheType,
    CacheConfig,
    RequestContext,
    DirectiveSet,
    CacheDirectives,
    ExclusionReason,
)
from .matcher import matches, matches_url, matches_any
from .engine import (
    CacheDecisionEngine,
    should_cache,
    exclusion_reason,
    is_cacheable_method,
    is_excluded_url,
    is_excluded_query_string,
    effective_query_patterns,
    bypass_query_pattern,
)
from .directives import (
    build_cache_control,
    build_cache_directives,
    build_vary,
    build_tags,
    build_cookie_vary,
    build_purge_all,
    build_purge_directive,
)
from .context import build_request_context, split_url
from .cache import LitespeedCache, create_litespeed_cache
from .config import LitespeedCacheSettings, get_settings


__all__ = [
    # Errors
    "ConfigurationError",
    # Types
    "CONTROL_HEADER",
    "VARY_HEADER",
    "PURGE_HEADER",
    "TAG_HEADER",
    "CacheType",
    "CacheConfig",
    "RequestContext",
    "DirectiveSet",
    "CacheDirectives",
    "ExclusionReason",
    # Matching
    "matches",
    "matches_url",
    "matches_any",
    # Decision engine
    "CacheDecisionEngine",
    "should_cache",
    "exclusion_reason",
    "is_cacheable_method",
    "is_excluded_url",
    "is_excluded_query_string",
    "effective_query_patterns",
    "bypass_query_pattern",
    # Directive encoding
    "build_cache_control",
    "build_cache_directives",
    "build_vary",
    "build_tags",
    "build_cookie_vary",
    "build_purge_all",
    "build_purge_directive",
    # Request context
    "build_request_context",
    "split_url",
    # Facade
    "LitespeedCache",
    "create_litespeed_cache",
    # Settings
    "LitespeedCacheSettings",
    "get_settings",
]

__version__ = "1.0.0"
