"""HTML renderers for the theme's templates."""

from .breadcrumbs import render_breadcrumb
from .context import SiteInfo, ThemeContext
from .document import (
    render_document,
    render_front_document,
    render_page_document,
    render_staff_document,
)
from .footer import render_footer
from .front_page import render_front_page, render_recent_news, render_slider, render_tiles, select_recent_news
from .header import render_announcement, render_header
from .layout import MobileMenuLayout, render_menu
from .page import render_full_width_page
from .staff import render_staff_item, render_staff_list

__all__ = [
    "MobileMenuLayout",
    "SiteInfo",
    "ThemeContext",
    "render_announcement",
    "render_breadcrumb",
    "render_document",
    "render_footer",
    "render_front_document",
    "render_front_page",
    "render_full_width_page",
    "render_header",
    "render_menu",
    "render_page_document",
    "render_recent_news",
    "render_slider",
    "render_staff_document",
    "render_staff_item",
    "render_staff_list",
    "render_tiles",
    "select_recent_news",
]
