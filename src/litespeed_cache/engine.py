"""
Cache eligibility decision for a single request.
"""
import logging
from typing import List, Optional

from .matcher import matches_any
from .types import CacheConfig, ExclusionReason, RequestContext

logger = logging.getLogger(__name__)


def bypass_query_pattern(config: CacheConfig) -> str:
    """Query string pattern that excludes requests carrying <bypass_cookie_name>=1."""
    return f"*{config.bypass_cookie_name}=1*"


def effective_query_patterns(config: CacheConfig) -> List[str]:
    """Configured query exclusions plus the bypass pattern, exactly once."""
    patterns = list(config.excluded_query_strings)
    synthetic = bypass_query_pattern(config)
    if synthetic not in patterns:
        patterns.append(synthetic)
    return patterns


def is_cacheable_method(method: Optional[str], cacheable_methods: List[str]) -> bool:
    """Check if request method is cacheable. An unknown method passes."""
    if not method:
        return True
    upper = method.upper()
    return any(upper == m.upper() for m in cacheable_methods)


def is_excluded_url(config: CacheConfig, path: str) -> bool:
    """Check if a URL path matches one of the excluded URL patterns."""
    return matches_any(config.excluded_urls, path, strip_slash=True)


def is_excluded_query_string(config: CacheConfig, query_string: str) -> bool:
    """Check if a query string matches an excluded pattern or the bypass pattern."""
    return matches_any(effective_query_patterns(config), query_string)


def exclusion_reason(
    config: CacheConfig, request: RequestContext
) -> Optional[ExclusionReason]:
    """
    Run the rule chain and return the first rule that excludes the request.

    Rules are evaluated in order and the first hit wins:
    disabled, zero lifetime, ajax, method, bypass cookie, non-interactive
    context, excluded URL, excluded query string.

    Returns:
        The ExclusionReason, or None if the request is cacheable.
    """
    if not config.enabled:
        return ExclusionReason.DISABLED

    if config.lifetime == 0:
        return ExclusionReason.ZERO_LIFETIME

    if request.is_ajax and not config.ajax_cacheable:
        return ExclusionReason.AJAX

    if not is_cacheable_method(request.method, config.cacheable_methods):
        return ExclusionReason.METHOD

    if request.has_bypass_cookie and not request.force_interactive:
        return ExclusionReason.BYPASS_COOKIE

    if not request.interactive:
        return ExclusionReason.NON_INTERACTIVE

    if is_excluded_url(config, request.path):
        return ExclusionReason.EXCLUDED_URL

    if is_excluded_query_string(config, request.query_string):
        return ExclusionReason.EXCLUDED_QUERY_STRING

    return None


def should_cache(config: CacheConfig, request: RequestContext) -> bool:
    """Check if the response to this request may be cached."""
    reason = exclusion_reason(config, request)
    if reason is not None:
        logger.debug(
            f"Not caching {request.method or '-'} {request.path!r}: {reason.value}"
        )
        return False
    return True


class CacheDecisionEngine:
    """
    Decision engine bound to one cache policy.

    Example:
        engine = CacheDecisionEngine(CacheConfig(excluded_urls=["admin/*"]))
        if engine.should_cache(context):
            ...
    """

    def __init__(self, config: Optional[CacheConfig] = None) -> None:
        self._config = config or CacheConfig()

    @property
    def config(self) -> CacheConfig:
        """Get configuration."""
        return self._config

    def should_cache(self, request: RequestContext) -> bool:
        """Check if the response to this request may be cached."""
        return should_cache(self._config, request)

    def exclusion_reason(self, request: RequestContext) -> Optional[ExclusionReason]:
        """First rule that excludes the request, or None."""
        return exclusion_reason(self._config, request)

    def is_excluded_url(self, path: str) -> bool:
        """Check if a URL path matches an excluded URL pattern."""
        return is_excluded_url(self._config, path)

    def is_excluded_query_string(self, query_string: str) -> bool:
        """Check if a query string matches an excluded or bypass pattern."""
        return is_excluded_query_string(self._config, query_string)

    def effective_query_patterns(self) -> List[str]:
        """Configured query exclusions plus the bypass pattern."""
        return effective_query_patterns(self._config)
