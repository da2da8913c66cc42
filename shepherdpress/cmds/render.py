"""Render commands for ShepherdPress CLI.

This module renders the theme's templates to HTML using the stored
settings and content from a local file or a WordPress site.
"""

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import ENV_SITE_URL
from ..exceptions import ShepherdPressError
from ..hooks import HookRegistry
from ..ports import ContentSource
from ..shortcodes import ShortcodeRegistry
from ..sources import open_content_source
from ..templates import (
    SiteInfo,
    ThemeContext,
    render_footer,
    render_front_document,
    render_header,
    render_page_document,
    render_staff_document,
)
from ..templates.front_page import DEFAULT_NEWS_COUNT
from .settings import fail, resolve_settings

app = typer.Typer()
console = Console(stderr=True)


def get_source(ctx: typer.Context) -> ContentSource:
    return open_content_source(
        profile=ctx.obj.get("profile"),
        content_file=ctx.obj.get("content_file"),
        debug=ctx.obj["debug"],
        console=console,
    )


def build_context(ctx: typer.Context, source: Optional[ContentSource] = None) -> ThemeContext:
    """Theme context for one render; the menu comes from the content source."""
    profile = ctx.obj.get("profile")
    site = SiteInfo.from_profile(profile) if profile else SiteInfo()
    return ThemeContext(
        settings=resolve_settings(ctx),
        site=site,
        hooks=HookRegistry(),
        shortcodes=ShortcodeRegistry(),
        menu=source.get_menu() if source is not None else None,
    )


def has_content_source(ctx: typer.Context) -> bool:
    """Whether a content file or a site is configured; the header renders without either."""
    profile = ctx.obj.get("profile")
    return bool(
        ctx.obj.get("content_file")
        or os.getenv(ENV_SITE_URL)
        or (profile and (profile.content_file or profile.url))
    )


def emit(ctx: typer.Context, markup: str, out: Optional[Path]) -> None:
    ctx.obj["output_formatter"].write_document(markup, out)
    if out is not None:
        console.print(f"[green]✓ Wrote {out}[/green]")


@app.command()
def front(
    ctx: typer.Context,
    news_count: int = typer.Option(DEFAULT_NEWS_COUNT, "--news-count", help="Number of recent news posts"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write HTML to a file instead of stdout"),
) -> None:
    """Render the front page.

    Examples:
        # Front page from a local content file
        shepherdpress --content content.yaml render front --out index.html

        # Front page from the active profile's WordPress site
        shepherdpress render front
    """
    try:
        source = get_source(ctx)
        theme = build_context(ctx, source)
        emit(ctx, render_front_document(theme, source, news_count), out)
    except ShepherdPressError as e:
        fail(ctx, e)


@app.command()
def page(
    ctx: typer.Context,
    page_id: int = typer.Argument(..., help="Page ID"),
    page_number: int = typer.Option(1, "--page-number", help="Part of multi-part page content"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write HTML to a file instead of stdout"),
) -> None:
    """Render a page with the full-width template.

    Examples:
        shepherdpress --content content.yaml render page 12
        shepherdpress render page 12 --page-number 2 --out about-2.html
    """
    try:
        source = get_source(ctx)
        theme = build_context(ctx, source)
        emit(ctx, render_page_document(theme, source, page_id, page_number), out)
    except ShepherdPressError as e:
        fail(ctx, e)


@app.command()
def staff(
    ctx: typer.Context,
    out: Optional[Path] = typer.Option(None, "--out", help="Write HTML to a file instead of stdout"),
) -> None:
    """Render the staff directory.

    Examples:
        shepherdpress --content content.yaml render staff
    """
    try:
        source = get_source(ctx)
        theme = build_context(ctx, source)
        emit(ctx, render_staff_document(theme, source), out)
    except ShepherdPressError as e:
        fail(ctx, e)


@app.command()
def header(
    ctx: typer.Context,
    out: Optional[Path] = typer.Option(None, "--out", help="Write HTML to a file instead of stdout"),
) -> None:
    """Render only the header fragment.

    Examples:
        shepherdpress render header
    """
    try:
        source = get_source(ctx) if has_content_source(ctx) else None
        emit(ctx, render_header(build_context(ctx, source)), out)
    except ShepherdPressError as e:
        fail(ctx, e)


@app.command()
def footer(
    ctx: typer.Context,
    out: Optional[Path] = typer.Option(None, "--out", help="Write HTML to a file instead of stdout"),
) -> None:
    """Render only the footer fragment.

    Examples:
        shepherdpress settings set footer_text_telephone "555-0100"
        shepherdpress render footer
    """
    try:
        emit(ctx, render_footer(build_context(ctx)), out)
    except ShepherdPressError as e:
        fail(ctx, e)
