"""Theme settings commands for ShepherdPress CLI.

This module provides commands for viewing and updating the stored values
of the theme's customizer settings.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import SettingsStore
from ..customizer import CustomizerRegistry
from ..exceptions import ShepherdPressError, format_error_for_user
from ..models.settings import SiteSettings

app = typer.Typer()
console = Console()


def settings_path(ctx: typer.Context) -> Path:
    """Settings file for this invocation.

    ``--settings`` wins over the profile's ``settings_file``; without either
    the file lives in the configuration directory.
    """
    if ctx.obj.get("settings_file"):
        return Path(ctx.obj["settings_file"])

    profile = ctx.obj.get("profile")
    if profile and profile.settings_file:
        return Path(profile.settings_file).expanduser()

    return ctx.obj["config_manager"].config_dir / "settings.yaml"


def get_store(ctx: typer.Context) -> SettingsStore:
    registry: CustomizerRegistry = ctx.obj["registry"]
    return SettingsStore(settings_path(ctx), registry)


def resolve_settings(ctx: typer.Context) -> SiteSettings:
    """Stored values resolved against the registered defaults."""
    store = get_store(ctx)
    return ctx.obj["registry"].resolve(store.as_mapping())


def fail(ctx: typer.Context, error: ShepherdPressError) -> None:
    console.print(format_error_for_user(error, ctx.obj.get("debug", False)), style="red", markup=False)
    raise typer.Exit(1)


@app.command("list")
def list_settings(
    ctx: typer.Context,
    section: Optional[str] = typer.Option(None, "--section", help="Show only settings of one section"),
    overridden: bool = typer.Option(False, "--overridden", help="Show only settings with a stored value"),
) -> None:
    """List every setting with its effective value.

    Examples:
        # List all settings
        shepherdpress settings list

        # Footer settings only
        shepherdpress settings list --section custom_footer_text

        # Settings that differ from their defaults, as JSON
        shepherdpress settings list --overridden --output json
    """
    formatter = ctx.obj["output_formatter"]
    registry: CustomizerRegistry = ctx.obj["registry"]

    try:
        settings = resolve_settings(ctx)
        rows = []
        for row in registry.describe():
            if section and row["section"] != section:
                continue
            is_set = settings.is_overridden(row["setting"])
            if overridden and not is_set:
                continue
            rows.append({
                "setting": row["setting"],
                "value": settings.get(row["setting"]),
                "stored": is_set,
                "section": row["section"],
            })

        formatter.render(rows, format=ctx.obj["output_format"], title="Theme Settings")

    except ShepherdPressError as e:
        fail(ctx, e)


@app.command()
def get(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Setting id"),
) -> None:
    """Print the effective value of one setting.

    Examples:
        shepherdpress settings get footer_text_telephone
    """
    try:
        value = resolve_settings(ctx).get(key)
    except ShepherdPressError as e:
        fail(ctx, e)
        return

    if ctx.obj["output_format"] in ["json", "yaml"]:
        ctx.obj["output_formatter"].render({key: value}, format=ctx.obj["output_format"])
    else:
        typer.echo(value)


@app.command("set")
def set_setting(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Setting id"),
    value: str = typer.Argument(..., help="Value to store"),
) -> None:
    """Store a value for a setting.

    An empty value is stored as-is and overrides the default.

    Examples:
        # Change the church phone number
        shepherdpress settings set footer_text_telephone "555-0100"

        # Switch the mobile menu to off-canvas
        shepherdpress settings set wpt_mobile_menu_layout offcanvas
    """
    try:
        store = get_store(ctx)
        store.set(key, value)
    except ShepherdPressError as e:
        fail(ctx, e)
        return

    console.print(f"[green]✓ Set {key}[/green]")
    if ctx.obj["debug"]:
        console.print(f"[dim]Saved to {store.file_path}[/dim]")


@app.command()
def unset(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Setting id"),
) -> None:
    """Remove a stored value so the default applies again.

    Examples:
        shepherdpress settings unset footer_text_telephone
    """
    try:
        removed = get_store(ctx).unset(key)
    except ShepherdPressError as e:
        fail(ctx, e)
        return

    if removed:
        console.print(f"[green]✓ {key} reset to default[/green]")
    else:
        console.print(f"[yellow]{key} has no stored value[/yellow]")


@app.command()
def schema(
    ctx: typer.Context,
    section: Optional[str] = typer.Option(None, "--section", help="Show only one section"),
) -> None:
    """Show the registered panels, sections, controls and defaults.

    Examples:
        shepherdpress settings schema
        shepherdpress settings schema --output yaml
    """
    registry: CustomizerRegistry = ctx.obj["registry"]
    rows = [row for row in registry.describe() if not section or row["section"] == section]
    try:
        ctx.obj["output_formatter"].render(rows, format=ctx.obj["output_format"], title="Customizer Schema")
    except ShepherdPressError as e:
        fail(ctx, e)
