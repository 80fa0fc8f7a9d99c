"""
Encoding of LiteSpeed cache, vary, tag and purge directive headers.

See https://docs.litespeedtech.com/lscache/devguide/controls/ for the
header grammar understood by LiteSpeed Web Server.
"""
from typing import Iterable, List, Optional, Union

from .types import (
    CONTROL_HEADER,
    PURGE_HEADER,
    TAG_HEADER,
    VARY_HEADER,
    CacheConfig,
    CacheDirectives,
    CacheType,
    DirectiveSet,
    as_list,
    validate_lifetime,
)

__all__ = [
    "CONTROL_HEADER",
    "VARY_HEADER",
    "PURGE_HEADER",
    "TAG_HEADER",
    "build_cache_control",
    "build_cache_directives",
    "build_vary",
    "build_tags",
    "build_cookie_vary",
    "build_purge_all",
    "build_purge_directive",
]


def build_cache_control(
    cache_type: Union[str, CacheType],
    lifetime: int,
    esi: bool = False,
) -> str:
    """Build X-LiteSpeed-Cache-Control value: '<type>[, esi=on], max-age=<n>'."""
    parts: List[str] = [CacheType.parse(cache_type).value]
    lifetime = validate_lifetime(lifetime)
    if esi:
        parts.append("esi=on")
    parts.append(f"max-age={lifetime}")
    return ", ".join(parts)


def _join(values: Iterable[str]) -> Optional[str]:
    values = list(values)
    if not values:
        return None
    return ", ".join(values)


def build_vary(values: Union[str, Iterable[str], None]) -> Optional[str]:
    """Build X-LiteSpeed-Vary value, or None when there is nothing to vary on."""
    return _join(as_list(values))


def build_tags(tags: Union[str, Iterable[str], None]) -> Optional[str]:
    """Build X-LiteSpeed-Tag value, or None when there are no tags."""
    return _join(as_list(tags))


def build_cookie_vary(cookie_name: str) -> str:
    """Vary value that makes the proxy keep one variant per cookie value."""
    return f"cookie={cookie_name}"


def build_cache_directives(
    config: CacheConfig,
    directive_set: Optional[DirectiveSet] = None,
    lifetime: Optional[int] = None,
    cache_type: Union[str, CacheType, None] = None,
) -> CacheDirectives:
    """
    Encode the headers for a cacheable response.

    Args:
        config: Cache policy supplying type, lifetime and ESI flag.
        directive_set: Accumulated tags and vary values.
        lifetime: Per-call max-age override, used when not None.
        cache_type: Per-call type override, used when not None.

    Raises:
        ConfigurationError: If cache_type is not public or private, or the
            lifetime is negative.
    """
    directive_set = directive_set or DirectiveSet()
    control = build_cache_control(
        config.cache_type if cache_type is None else cache_type,
        config.lifetime if lifetime is None else lifetime,
        config.esi_enabled,
    )
    return CacheDirectives(
        control=control,
        vary=build_vary(directive_set.vary),
        tag=build_tags(directive_set.tags),
    )


def build_purge_all() -> str:
    """Purge value that invalidates everything in the cache."""
    return "*"


def build_purge_directive(
    uri: Optional[str] = None,
    tags: Union[str, Iterable[str], None] = None,
) -> str:
    """
    Build X-LiteSpeed-Purge value for a URI and/or tags.

    '/about-us ' for a URI, 'tag=a, tag=b' for tags, both concatenated when
    given together. Empty string means there is nothing to purge.
    """
    value = ""
    if uri:
        value += "/" + uri.lstrip("/") + " "
    tag_list = as_list(tags)
    if tag_list:
        value += ", ".join(f"tag={tag}" for tag in tag_list)
    return value
