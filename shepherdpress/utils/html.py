"""HTML helpers shared by the templates."""

import html
import re
from datetime import datetime
from urllib.parse import urlparse

_ALLOWED_SCHEMES = {"", "http", "https", "mailto", "tel"}


def esc_attr(text: str) -> str:
    return html.escape(text or "", quote=True)


def esc_url(url: str) -> str:
    """Escape a URL for an attribute, dropping unsafe schemes.

    Relative URLs and fragments pass through. A URL with a scheme outside
    http, https, mailto and tel becomes the empty string.
    """
    url = re.sub(r"\s+", "", url or "")
    if not url:
        return ""
    if urlparse(url).scheme.lower() not in _ALLOWED_SCHEMES:
        return ""
    return html.escape(url, quote=True)


def format_post_date(value: datetime) -> str:
    """Format a date the way the default ``F j, Y`` setting does."""
    return f"{value:%B} {value.day}, {value.year}"
