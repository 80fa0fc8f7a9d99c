"""Tests for configuration and context types."""
import pytest

from litespeed_cache import (
    CacheConfig,
    CacheType,
    ConfigurationError,
    DirectiveSet,
    RequestContext,
)
from litespeed_cache.types import validate_lifetime


class TestCacheType:
    def test_parse(self):
        assert CacheType.parse("public") is CacheType.PUBLIC
        assert CacheType.parse("PRIVATE") is CacheType.PRIVATE
        assert CacheType.parse(CacheType.PRIVATE) is CacheType.PRIVATE

    @pytest.mark.parametrize("value", ["foo", "", None, 1])
    def test_parse_invalid(self, value):
        with pytest.raises(ConfigurationError) as exc_info:
            CacheType.parse(value)
        assert exc_info.value.value == value
        assert repr(value) in str(exc_info.value)


class TestCacheConfig:
    def test_defaults(self):
        config = CacheConfig()
        assert config.enabled is True
        assert config.lifetime == 7200
        assert config.cache_type is CacheType.PUBLIC
        assert config.esi_enabled is False
        assert config.bypass_cookie_name == "cache_bypass"
        assert config.excluded_urls == []
        assert config.excluded_query_strings == []
        assert config.ajax_cacheable is False
        assert config.cacheable_methods == ["GET", "HEAD"]

    def test_string_type_is_coerced(self):
        assert CacheConfig(cache_type="private").cache_type is CacheType.PRIVATE

    def test_invalid_type(self):
        with pytest.raises(ConfigurationError):
            CacheConfig(cache_type="foo")

    def test_negative_lifetime(self):
        with pytest.raises(ConfigurationError):
            CacheConfig(lifetime=-1)

    def test_single_strings_become_lists(self):
        config = CacheConfig(
            excluded_urls="admin/*",
            excluded_query_strings="debug=*",
            cacheable_methods="GET",
        )
        assert config.excluded_urls == ["admin/*"]
        assert config.excluded_query_strings == ["debug=*"]
        assert config.cacheable_methods == ["GET"]

    def test_default_lists_are_not_shared(self):
        a, b = CacheConfig(), CacheConfig()
        a.cacheable_methods.append("POST")
        assert b.cacheable_methods == ["GET", "HEAD"]


class TestValidateLifetime:
    @pytest.mark.parametrize("value", [0, 60, 7200])
    def test_valid(self, value):
        assert validate_lifetime(value) == value

    @pytest.mark.parametrize("value", [-1, None, "60", 1.5, True])
    def test_invalid(self, value):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_lifetime(value)
        assert exc_info.value.value == value


class TestRequestContext:
    def test_default_is_not_interactive(self):
        assert RequestContext().interactive is False

    def test_interactive(self):
        assert RequestContext(is_interactive=True).interactive is True
        assert RequestContext(force_interactive=True).interactive is True

    def test_frozen(self):
        context = RequestContext()
        with pytest.raises(AttributeError):
            context.path = "/other"


class TestDirectiveSet:
    def test_add_tags_preserves_order_and_duplicates(self):
        directive_set = DirectiveSet()
        directive_set.add_tags(["a", "b"])
        directive_set.add_tags("c")
        directive_set.add_tag("a")
        assert directive_set.tags == ["a", "b", "c", "a"]

    def test_add_vary(self):
        directive_set = DirectiveSet()
        directive_set.add_vary("example.com")
        directive_set.add_vary(["default-app"])
        assert directive_set.vary == ["example.com", "default-app"]

    def test_clear(self):
        directive_set = DirectiveSet(tags=["a"], vary=["b"], uri="/c")
        directive_set.clear()
        assert directive_set == DirectiveSet()
