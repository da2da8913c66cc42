"""Utility modules for ShepherdPress.

This package contains utility functions and classes for retry logic and
HTML helpers shared by the templates.
"""

from .retry import RetryManager
from .html import esc_attr, esc_url, format_post_date

__all__ = [
    "RetryManager",
    "esc_attr",
    "esc_url",
    "format_post_date",
]
