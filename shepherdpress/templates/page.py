"""Full-width page template."""

from typing import List

from .. import hooks
from ..models.post import Ancestor, Comment, Page, Tag
from ..utils.html import esc_url, format_post_date
from .breadcrumbs import render_breadcrumb
from .context import ThemeContext

PAGE_BREAK = "<!--nextpage-->"


def split_pages(content: str) -> List[str]:
    """Split content on page-break markers; always at least one part."""
    return [part.strip("\n") for part in content.split(PAGE_BREAK)]


def page_link(page: Page, number: int) -> str:
    if number == 1:
        return page.link
    return f"{page.link.rstrip('/')}/{number}/"


def render_page_links(page: Page, current: int, total: int) -> str:
    """``Pages:`` navigation; empty for single-part content."""
    if total <= 1:
        return ""

    links = []
    for number in range(1, total + 1):
        if number == current:
            links.append(f'<span class="post-page-numbers current" aria-current="page">{number}</span>')
        else:
            links.append(f'<a href="{esc_url(page_link(page, number))}" class="post-page-numbers">{number}</a>')
    return f'<nav id="page-nav"><p>Pages: {" ".join(links)}</p></nav>'


def render_tags(tags: List[Tag]) -> str:
    if not tags:
        return ""
    return "Tags: " + ", ".join(f'<a href="{esc_url(tag.link)}" rel="tag">{tag.name}</a>' for tag in tags)


def render_comment(comment: Comment) -> str:
    author = comment.author
    if comment.author_url:
        author = f'<a href="{esc_url(comment.author_url)}" rel="external nofollow" class="url">{author}</a>'
    return (
        f'\t\t\t\t<li id="comment-{comment.id}" class="comment">\n'
        '\t\t\t\t\t<article class="comment-body">\n'
        '\t\t\t\t\t\t<footer class="comment-meta">\n'
        f'\t\t\t\t\t\t\t<cite class="fn">{author}</cite>\n'
        f'\t\t\t\t\t\t\t<time datetime="{comment.date.isoformat()}">{format_post_date(comment.date)}</time>\n'
        "\t\t\t\t\t\t</footer>\n"
        f'\t\t\t\t\t\t<div class="comment-content">{comment.content}</div>\n'
        "\t\t\t\t\t</article>\n"
        "\t\t\t\t</li>\n"
    )


def render_comments(page: Page) -> str:
    """Approved comments; nothing when the page has none."""
    if not page.comments:
        return ""

    count = len(page.comments)
    noun = "Response" if count == 1 else "Responses"
    closed = '\t\t\t<p class="no-comments">Comments are closed.</p>\n' if page.comment_status == "closed" else ""
    return (
        '\t\t\t<section id="comments">\n'
        f"\t\t\t<h3>{count} {noun} to &ldquo;{page.title}&rdquo;</h3>\n"
        '\t\t\t<ol class="comment-list">\n'
        f"{''.join(render_comment(c) for c in page.comments)}"
        "\t\t\t</ol>\n"
        f"{closed}"
        "\t\t\t</section>\n"
    )


def render_full_width_page(
    ctx: ThemeContext,
    page: Page,
    ancestors: List[Ancestor],
    page_number: int = 1,
) -> str:
    """Full-width page body.

    Args:
        ctx: Render context
        page: Page to render
        ancestors: Page ancestry, immediate parent first
        page_number: Which part of multi-part content to show (1-based,
            clamped to the available parts)

    Returns:
        Body markup, to be wrapped by ``render_document``
    """
    parts = split_pages(page.content)
    current = min(max(page_number, 1), len(parts))
    content = ctx.shortcodes.expand(parts[current - 1])

    return (
        f"{ctx.hooks.do_action(hooks.BEFORE_CONTENT, ctx=ctx, page=page)}"
        '<section class="title-header">\n'
        "\t<header>\n"
        f"{render_breadcrumb(ancestors)}"
        f'\t\t<h1 class="entry-title">{page.title}</h1>\n'
        "\t</header>\n"
        "</section>\n"
        '<div id="page-full-width">\n'
        '\t<div role="main">\n'
        f'\t\t<article class="main-content page type-page" id="post-{page.id}">\n'
        f"{ctx.hooks.do_action(hooks.PAGE_BEFORE_ENTRY_CONTENT, ctx=ctx, page=page)}"
        '\t\t\t<div class="entry-content">\n'
        f"{content}\n"
        "\t\t\t</div>\n"
        "\t\t\t<footer>\n"
        f"\t\t\t\t{render_page_links(page, current, len(parts))}\n"
        f"\t\t\t\t<p>{render_tags(page.tags)}</p>\n"
        "\t\t\t</footer>\n"
        f"{ctx.hooks.do_action(hooks.PAGE_BEFORE_COMMENTS, ctx=ctx, page=page)}"
        f"{render_comments(page)}"
        f"{ctx.hooks.do_action(hooks.PAGE_AFTER_COMMENTS, ctx=ctx, page=page)}"
        "\t\t</article>\n"
        "\t</div>\n"
        "</div>\n"
        f"{ctx.hooks.do_action(hooks.AFTER_CONTENT, ctx=ctx, page=page)}"
    )
