"""LiteSpeed cache settings using Pydantic Settings."""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings

from .types import (
    DEFAULT_BYPASS_COOKIE_NAME,
    DEFAULT_CACHEABLE_METHODS,
    DEFAULT_LIFETIME_SECONDS,
    CacheConfig,
)


class LitespeedCacheSettings(BaseSettings):
    """Cache policy defaults loaded from LITESPEED_CACHE_* environment variables.

    List settings take JSON, e.g. LITESPEED_CACHE_EXCLUDED_URLS='["admin/*"]'.
    """

    ENABLED: bool = True
    LIFETIME: int = DEFAULT_LIFETIME_SECONDS
    TYPE: str = "public"
    ESI_ENABLED: bool = False
    BYPASS_COOKIE_NAME: str = DEFAULT_BYPASS_COOKIE_NAME
    EXCLUDED_URLS: List[str] = []
    EXCLUDED_QUERY_STRINGS: List[str] = []
    AJAX_CACHEABLE: bool = False
    CACHEABLE_METHODS: List[str] = list(DEFAULT_CACHEABLE_METHODS)

    class Config:
        env_prefix = "LITESPEED_CACHE_"
        case_sensitive = True
        env_file = None  # Use system env only

    def to_cache_config(self) -> CacheConfig:
        """Build a validated CacheConfig. Raises ConfigurationError on a bad TYPE."""
        return CacheConfig(
            enabled=self.ENABLED,
            lifetime=self.LIFETIME,
            cache_type=self.TYPE,
            esi_enabled=self.ESI_ENABLED,
            bypass_cookie_name=self.BYPASS_COOKIE_NAME,
            excluded_urls=list(self.EXCLUDED_URLS),
            excluded_query_strings=list(self.EXCLUDED_QUERY_STRINGS),
            ajax_cacheable=self.AJAX_CACHEABLE,
            cacheable_methods=list(self.CACHEABLE_METHODS),
        )


@lru_cache()
def get_settings() -> LitespeedCacheSettings:
    """Get cached settings instance."""
    return LitespeedCacheSettings()
