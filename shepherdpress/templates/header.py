"""Document head, announcement banner and navigation shell."""

from typing import List, Optional

from .. import hooks
from ..utils.html import esc_attr, esc_url
from .context import ThemeContext
from .layout import MobileMenuLayout, render_menu


def render_announcement(text: str) -> str:
    """Dismissible callout; nothing at all when ``text`` is empty."""
    if not text:
        return ""
    return (
        '\t<div class="callout primary announcement-banner" data-closable>\n'
        f"\t\t<p>{text}</p>\n"
        '\t\t<button class="close-button" aria-label="Dismiss announcement" type="button" data-close>\n'
        '\t\t\t<span aria-hidden="true">&times;</span>\n'
        "\t\t</button>\n"
        "\t</div>\n"
    )


def body_class_attr(layout: MobileMenuLayout, body_classes: Optional[List[str]] = None) -> str:
    classes = [c for c in body_classes or [] if c]
    classes.append(layout.body_class)
    return esc_attr(" ".join(classes))


def render_header(ctx: ThemeContext, body_classes: Optional[List[str]] = None) -> str:
    """Everything from the doctype up to the page content.

    Args:
        ctx: Render context
        body_classes: Extra classes for ``<body>``; the layout class is appended

    Returns:
        Header markup
    """
    site = ctx.site
    layout = MobileMenuLayout.from_settings(ctx.settings)
    home = esc_url(site.home_url)

    mobile_top_bar = ""
    if layout is MobileMenuLayout.TOPBAR:
        mobile_top_bar = (
            '\t\t\t\t<div class="mobile-top-bar show-for-small-only" id="mobile-menu" data-toggler=".is-open">\n'
            f"{render_menu(ctx.menu, 'vertical menu', 'data-accordion-menu', indent=5)}"
            "\t\t\t\t</div>\n"
        )

    return (
        "<!doctype html>\n"
        f'<html class="no-js" lang="{esc_attr(site.language)}">\n'
        "\t<head>\n"
        f'\t\t<meta charset="{esc_attr(site.charset)}" />\n'
        '\t\t<meta name="viewport" content="width=device-width, initial-scale=1.0" />\n'
        f"\t\t<title>{site.name}</title>\n"
        f"{ctx.hooks.do_action(hooks.HEAD, ctx=ctx)}"
        "\t</head>\n"
        "\n"
        f'\t<body class="{body_class_attr(layout, body_classes)}">\n'
        f"{ctx.hooks.do_action(hooks.AFTER_BODY, ctx=ctx)}"
        f"{layout.wrapper_open(ctx.menu)}"
        f"{ctx.hooks.do_action(hooks.LAYOUT_START, ctx=ctx)}"
        f"{render_announcement(ctx.settings.get('header_announcement_text'))}"
        '\t<header id="masthead" class="site-header" role="banner">\n'
        '\t\t<div class="title-bar" data-responsive-toggle="site-navigation">\n'
        '\t\t\t<button class="menu-icon" type="button" data-toggle="mobile-menu"></button>\n'
        '\t\t\t<div class="title-bar-title">\n'
        '\t\t\t\t<div class="row">\n'
        '\t\t\t\t\t<div class="columns text-center">\n'
        f'\t\t\t\t\t\t<a href="{home}" rel="home">{site.name}</a>\n'
        "\t\t\t\t\t</div>\n"
        "\t\t\t\t</div>\n"
        "\t\t\t</div>\n"
        "\t\t</div>\n"
        '\t\t<div class="row hide-for-small-only">\n'
        '\t\t\t<div class="columns text-center">\n'
        f'\t\t\t\t<a href="{home}" rel="home">\n'
        f'\t\t\t\t\t<img src="{esc_url(site.assets_url)}/assets/images/seal_sm.png" alt="" />\n'
        "\t\t\t\t</a>\n"
        "\t\t\t</div>\n"
        '\t\t\t<div class="columns centered text-center">\n'
        f'\t\t\t\t<h1 class="site-title">{site.name}</h1>\n'
        "\t\t\t</div>\n"
        "\t\t</div>\n"
        '\t\t<nav id="site-navigation" class="main-navigation top-bar" role="navigation">\n'
        '\t\t\t<div class="row gs-main-menu">\n'
        f"{render_menu(ctx.menu, 'dropdown menu desktop-menu', 'data-dropdown-menu', indent=4)}"
        f"{mobile_top_bar}"
        "\t\t\t</div>\n"
        "\t\t</nav>\n"
        "\t</header>\n"
        f"{ctx.hooks.do_action(hooks.AFTER_HEADER, ctx=ctx)}"
    )
