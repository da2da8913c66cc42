"""Front page: slider, recent news and the four link tiles."""

from typing import List

from ..customizer import FRONT_PAGE_TILE_COUNT
from ..models.post import FeaturedImage, NewsPost
from ..models.settings import SiteSettings
from ..utils.html import esc_attr, esc_url, format_post_date
from .context import ThemeContext

DEFAULT_NEWS_COUNT = 3

TILE_DIVIDER = '\t\t<hr class="fp-link-divider show-for-small-only" />\n'


def select_recent_news(posts: List[NewsPost], limit: int) -> List[NewsPost]:
    """Newest ``limit`` posts, newest first."""
    if limit <= 0:
        return []
    return sorted(posts, key=lambda post: post.published_at, reverse=True)[:limit]


def render_featured_image(image: FeaturedImage) -> str:
    src = image.sizes.get("medium", image.url)
    return (
        '\t\t\t<div class="featured-image">\n'
        f'\t\t\t\t<img src="{esc_url(src)}" alt="{esc_attr(image.alt)}" />\n'
        "\t\t\t</div>\n"
    )


def render_recent_news(posts: List[NewsPost], limit: int = DEFAULT_NEWS_COUNT) -> str:
    """Recent News section; the list region is empty when there are no posts."""
    width = 12 // limit if 1 <= limit <= 4 else 4

    items = []
    for post in select_recent_news(posts, limit):
        featured = render_featured_image(post.featured_image) if post.featured_image else ""
        items.append(
            f'\t\t<div class="column small-12 medium-{width}">\n'
            f'\t\t\t<div class="article-header text-center">{post.title}</div>\n'
            f"{featured}"
            f'\t\t\t<div class="article-date">{format_post_date(post.published_at)}</div>\n'
            "\t\t</div>\n"
        )

    return (
        '<section aria-label="Recent News" class="articles recent-news">\n'
        '\t<div class="row">\n'
        '\t\t<div class="column small-12">\n'
        "\t\t\t<h2>Recent News</h2>\n"
        "\t\t</div>\n"
        "\t</div>\n"
        '\t<div class="row">\n'
        f"{''.join(items)}"
        "\t</div>\n"
        "</section>\n"
    )


def render_tile(settings: SiteSettings, number: int) -> str:
    icon = settings.get(f"custom_fp_icon_{number}")
    link = settings.get(f"custom_fp_link_{number}")
    text = settings.get(f"custom_fp_text_{number}")
    return (
        f'\t\t<div class="column small-12 medium-3 text-center fp-link fp-link-{number}">\n'
        f'\t\t\t<a href="{link}">\n'
        f'\t\t\t\t<i class="fa {icon} fa-3x" aria-hidden="true"></i>\n'
        f'\t\t\t\t<span class="fp-link-text">{text}</span>\n'
        "\t\t\t</a>\n"
        "\t\t</div>\n"
    )


def render_tiles(settings: SiteSettings) -> str:
    """The fixed set of link tiles, always in slot order."""
    tiles = [render_tile(settings, number) for number in range(1, FRONT_PAGE_TILE_COUNT + 1)]
    return (
        '<section aria-label="Quick Links" class="front-page-links">\n'
        '\t<div class="row">\n'
        f"{TILE_DIVIDER.join(tiles)}"
        "\t</div>\n"
        "</section>\n"
    )


def render_slider(ctx: ThemeContext) -> str:
    """Expanded slider shortcode, emitted above the content container."""
    slider = ctx.shortcodes.expand(ctx.settings.get("custom_fp_slider_shortcode"))
    return f'<div class="front-page-slider">{slider}</div>\n'


def render_front_page(ctx: ThemeContext, posts: List[NewsPost], news_count: int = DEFAULT_NEWS_COUNT) -> str:
    """Front page content: recent news, then the link tiles.

    Args:
        ctx: Render context
        posts: Posts of the recent-news category
        news_count: How many posts to show

    Returns:
        Body markup, to be wrapped by ``render_document``
    """
    return render_recent_news(posts, news_count) + render_tiles(ctx.settings)
