"""Tests for wildcard matching."""
import pytest

from litespeed_cache import matches, matches_url, matches_any


class TestMatches:
    @pytest.mark.parametrize(
        "pattern,subject,expected",
        [
            ("test", "test", True),
            ("test", "tests", False),
            ("test", "Test", False),
            ("", "", True),
            ("a/b", "a/b", True),
        ],
    )
    def test_literal_pattern_is_equality(self, pattern, subject, expected):
        assert matches(pattern, subject) is expected

    def test_trailing_wildcard(self):
        assert matches("test*", "test/foo") is True
        assert matches("test*", "test") is True
        assert matches("test*", "atest") is False

    def test_wildcard_crosses_slashes(self):
        assert matches("*/foo/*/bar", "test/foo/some/bar") is True
        assert matches("*/foo/*/bar", "test/foo/a/b/c/bar") is True
        assert matches("*/foo/*/bar", "test/foo/bar") is False

    def test_query_string_wildcards(self):
        assert matches("*foo=*", "?test=1&foo=bar&baz=bat") is True
        assert matches("foo=*", "foo=bar") is True
        assert matches("foo=*", "a=1&foo=bar") is False

    def test_question_mark_is_literal(self):
        assert matches("page?", "page1") is False
        assert matches("page?", "page?") is True

    def test_brackets_are_literal(self):
        assert matches("item[0]", "item0") is False
        assert matches("item[0]", "item[0]") is True

    def test_case_sensitive(self):
        assert matches("Admin*", "admin/users") is False

    def test_none_is_treated_as_empty(self):
        assert matches("*", None) is True
        assert matches(None, "") is True


class TestMatchesUrl:
    def test_strips_leading_slash_from_both(self):
        assert matches_url("/test*", "test/foo") is True
        assert matches_url("test*", "/test/foo") is True
        assert matches_url("/test", "/test") is True

    def test_strips_only_one_slash(self):
        assert matches_url("test", "//test") is False


class TestMatchesAny:
    def test_empty_patterns(self):
        assert matches_any([], "anything") is False

    def test_any_pattern_matches(self):
        assert matches_any(["admin/*", "test*"], "test/foo") is True

    def test_strip_slash_option(self):
        assert matches_any(["/test*"], "/test", strip_slash=True) is True
        assert matches_any(["/test*"], "test", strip_slash=False) is False
