"""
Wildcard matching for URL and query string exclusion lists.

Only `*` is a wildcard and it matches any run of characters, including `/`.
Matching is case-sensitive on every platform.
"""
import fnmatch
from typing import Iterable


def _escape(pattern: str) -> str:
    """Neutralize fnmatch's `?` and `[...]` so they match literally."""
    return "".join("[" + ch + "]" if ch in "?[" else ch for ch in pattern)


def matches(pattern: str, subject: str) -> bool:
    """Check if subject matches a `*` glob pattern."""
    return fnmatch.fnmatchcase(subject or "", _escape(pattern or ""))


def matches_url(pattern: str, subject: str) -> bool:
    """Like matches(), after stripping one leading '/' from both sides."""
    return matches(_strip_slash(pattern), _strip_slash(subject))


def matches_any(patterns: Iterable[str], subject: str, strip_slash: bool = False) -> bool:
    """Check if subject matches any of the patterns."""
    match = matches_url if strip_slash else matches
    return any(match(pattern, subject) for pattern in patterns)


def _strip_slash(value: str) -> str:
    value = value or ""
    return value[1:] if value.startswith("/") else value
