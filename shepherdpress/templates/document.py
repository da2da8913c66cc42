"""Whole-document composition.

Every page is header, body and footer. The header opens the mobile-menu
wrapper and the footer closes it, so the three must be rendered against
the same context; ``render_document`` is the only place that joins them.
"""

from typing import List, Optional

from ..ports import RECENT_NEWS_CATEGORY, ContentSource
from .context import ThemeContext
from .footer import render_footer
from .front_page import DEFAULT_NEWS_COUNT, render_front_page, render_slider
from .header import render_header
from .page import render_full_width_page
from .staff import render_staff_list


def render_document(
    ctx: ThemeContext,
    body: str,
    body_classes: Optional[List[str]] = None,
    before_container: str = "",
) -> str:
    """Wrap body markup in the site header and footer.

    ``before_container`` goes between the header and the content container.
    """
    return (
        f"{render_header(ctx, body_classes)}"
        f"{before_container}"
        '<section class="container">\n'
        f"{body}"
        "</section>\n"
        f"{render_footer(ctx)}"
    )


def render_front_document(
    ctx: ThemeContext,
    source: ContentSource,
    news_count: int = DEFAULT_NEWS_COUNT,
) -> str:
    """Front page as a full document.

    Args:
        ctx: Render context
        source: Where the recent news comes from
        news_count: How many recent posts to show

    Returns:
        Complete HTML document
    """
    posts = source.get_posts_by_category(RECENT_NEWS_CATEGORY, news_count)
    body = render_front_page(ctx, posts, news_count)
    return render_document(ctx, body, ["home", "page-template-front"], before_container=render_slider(ctx))


def render_page_document(
    ctx: ThemeContext,
    source: ContentSource,
    page_id: int,
    page_number: int = 1,
) -> str:
    """Full-width page as a full document.

    Raises:
        ContentNotFoundError: If the page does not exist
    """
    page = source.get_page(page_id)
    ancestors = source.get_ancestors(page_id)
    body = render_full_width_page(ctx, page, ancestors, page_number)
    return render_document(ctx, body, ["page", f"page-id-{page.id}", "page-template-page-full-width"])


def render_staff_document(ctx: ThemeContext, source: ContentSource) -> str:
    body = render_staff_list(source.get_staff())
    return render_document(ctx, body, ["post-type-archive", "post-type-archive-staff"])
