"""
Construction of RequestContext from plain request data.
"""
from dataclasses import replace
from typing import Mapping, Optional, Tuple
from urllib.parse import urlsplit

from .types import DEFAULT_BYPASS_COOKIE_NAME, RequestContext

AJAX_HEADER = "x-requested-with"
AJAX_HEADER_VALUE = "XMLHttpRequest"


def split_url(url: Optional[str]) -> Tuple[str, str]:
    """Split a full or relative URL into (path, query_string). Unparseable URLs give ('', '')."""
    if not url:
        return "", ""
    try:
        parts = urlsplit(url)
    except ValueError:
        return "", ""
    return parts.path or "", parts.query or ""


def get_header_value(headers: Optional[Mapping[str, str]], key: str) -> Optional[str]:
    """Get header value case-insensitively."""
    if not headers:
        return None
    lower_key = key.lower()
    for k, v in headers.items():
        if k.lower() == lower_key:
            return v
    return None


def is_ajax_request(headers: Optional[Mapping[str, str]]) -> bool:
    return get_header_value(headers, AJAX_HEADER) == AJAX_HEADER_VALUE


def has_bypass_cookie(
    cookies: Optional[Mapping[str, str]],
    cookie_name: str = DEFAULT_BYPASS_COOKIE_NAME,
) -> bool:
    return bool(cookies) and cookies.get(cookie_name) == "1"


def build_request_context(
    method: Optional[str] = None,
    url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    cookies: Optional[Mapping[str, str]] = None,
    bypass_cookie_name: str = DEFAULT_BYPASS_COOKIE_NAME,
    interactive: bool = True,
    force_interactive: bool = False,
) -> RequestContext:
    """
    Build a RequestContext from request method, URL, headers and cookies.

    Args:
        method: Request method, None when unknown.
        url: Full or relative request URL ('/path?query').
        headers: Request headers (case-insensitive lookup).
        cookies: Request cookies.
        bypass_cookie_name: Cookie that disables caching when set to '1'.
        interactive: False when not serving a live HTTP request.
        force_interactive: Test-harness override, see RequestContext.

    Returns:
        A new RequestContext.
    """
    path, query_string = split_url(url)
    return RequestContext(
        method=method or None,
        is_ajax=is_ajax_request(headers),
        has_bypass_cookie=has_bypass_cookie(cookies, bypass_cookie_name),
        is_interactive=interactive,
        force_interactive=force_interactive,
        path=path,
        query_string=query_string,
    )


def with_url(context: RequestContext, url: Optional[str]) -> RequestContext:
    """Return a copy of context with path and query taken from url; unchanged if url is empty."""
    if not url:
        return context
    path, query_string = split_url(url)
    return replace(context, path=path, query_string=query_string)
