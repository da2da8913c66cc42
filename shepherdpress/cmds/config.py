"""Configuration management commands for ShepherdPress CLI.

This module provides commands for managing site profiles: where a site's
content comes from, where its settings are stored, and the site-wide
values the header needs.
"""

import os
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from ..config import ENV_APP_PASSWORD, ENV_SITE_URL, ENV_USERNAME, ConfigManager
from ..exceptions import ConfigError

app = typer.Typer()
console = Console()


@app.command()
def init(
    ctx: typer.Context,
    profile_name: str = typer.Option("default", "--name", help="Profile name"),
    url: Optional[str] = typer.Option(None, "--url", help="WordPress site URL"),
    username: Optional[str] = typer.Option(None, "--username", help="WordPress user name"),
    app_password: Optional[str] = typer.Option(None, "--app-password", help="WordPress application password"),
    site_name: Optional[str] = typer.Option(None, "--site-name", help="Site title shown in the header"),
    settings_file: Optional[str] = typer.Option(None, "--settings-file", help="YAML file for stored settings"),
    content_file: Optional[str] = typer.Option(None, "--content-file", help="YAML/JSON file with offline content"),
    validate: bool = typer.Option(False, "--validate", help="Check the site answers before saving"),
    interactive: bool = typer.Option(False, "--interactive", help="Prompt for missing credentials"),
    activate: bool = typer.Option(False, "--activate", help="Make this the active profile"),
) -> None:
    """Create a new site profile.

    Examples:
        # Offline profile rendering from a content file
        shepherdpress config init --name local --content-file content.yaml

        # Profile reading from a live WordPress site
        shepherdpress config init --name live --url https://goodshepherd.example.org

        # Prompt for the application password
        shepherdpress config init --name live --url https://goodshepherd.example.org --username editor --interactive
    """
    config_manager: ConfigManager = ctx.obj["config_manager"]

    if interactive and username and not app_password:
        app_password = Prompt.ask("Application password", password=True, show_default=False)

    options = {}
    if site_name:
        options["site_name"] = site_name
    if settings_file:
        options["settings_file"] = settings_file
    if content_file:
        options["content_file"] = content_file

    try:
        profile = config_manager.create_profile(
            profile_name,
            url=url,
            username=username,
            app_password=app_password,
            validate_connection=validate,
            **options,
        )

        # The first profile becomes the active one
        if activate or config_manager.get_active_profile() is None:
            config_manager.set_active_profile(profile.name)
            console.print(f"[green]✓ Profile '{profile.name}' created and activated[/green]")
        else:
            console.print(f"[green]✓ Profile '{profile.name}' created[/green]")

    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


@app.command("list")
def list_profiles(ctx: typer.Context) -> None:
    """List all site profiles.

    Examples:
        shepherdpress config list
        shepherdpress config list --output json
    """
    config_manager: ConfigManager = ctx.obj["config_manager"]
    formatter = ctx.obj["output_formatter"]

    profiles = config_manager.list_profiles()
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'shepherdpress config init' to create one.[/yellow]")
        return

    if ctx.obj["output_format"] in ["json", "yaml"]:
        formatter.render(profiles, format=ctx.obj["output_format"])
        return

    table = Table(title="Site Profiles")
    table.add_column("Name", style="bold")
    table.add_column("URL", style="cyan")
    table.add_column("Content File", style="dim")
    table.add_column("Settings File", style="dim")
    table.add_column("Active", style="yellow")

    for profile in profiles:
        table.add_row(
            profile["name"],
            profile.get("url") or "—",
            profile.get("content_file") or "—",
            profile.get("settings_file") or "—",
            "✓" if profile["active"] else "—",
        )

    console.print(table)


@app.command("use")
def use_profile(
    ctx: typer.Context,
    profile_name: str = typer.Argument(..., help="Profile to activate"),
) -> None:
    """Switch the active profile.

    Examples:
        shepherdpress config use live
    """
    config_manager: ConfigManager = ctx.obj["config_manager"]

    try:
        config_manager.set_active_profile(profile_name)
        console.print(f"[green]✓ Active profile is now '{profile_name}'[/green]")
    except ConfigError as e:
        console.print(f"[red]Error switching profile: {e}[/red]")
        raise typer.Exit(1)


@app.command("delete")
def delete_profile(
    ctx: typer.Context,
    profile_name: str = typer.Argument(..., help="Profile name to delete"),
    force: bool = typer.Option(False, "--force", help="Delete without confirmation"),
) -> None:
    """Delete a site profile.

    Examples:
        # Delete with confirmation
        shepherdpress config delete old-site

        # Force delete without confirmation
        shepherdpress config delete old-site --force
    """
    config_manager: ConfigManager = ctx.obj["config_manager"]

    try:
        profile = config_manager.get_profile(profile_name)
        is_active = config_manager.get_active_profile() == profile.name

        if not force:
            if is_active:
                console.print("[yellow]Warning: This is the active profile[/yellow]")
            if not typer.confirm(f"Are you sure you want to delete profile '{profile_name}'?"):
                console.print("[yellow]Delete cancelled[/yellow]")
                return

        config_manager.delete_profile(profile_name)
        console.print(f"[green]Profile '{profile_name}' deleted successfully![/green]")

        if is_active:
            console.print("[yellow]Note: Run 'shepherdpress config use' to pick a new active profile[/yellow]")

    except ConfigError as e:
        console.print(f"[red]Error deleting profile: {e}[/red]")
        raise typer.Exit(1)


@app.command("show")
def show_config(
    ctx: typer.Context,
    profile_name: Optional[str] = typer.Argument(None, help="Profile to show (default: active)"),
) -> None:
    """Show a profile and the configuration location.

    Application passwords are never printed.

    Examples:
        shepherdpress config show
        shepherdpress config show live --output yaml
    """
    config_manager: ConfigManager = ctx.obj["config_manager"]
    formatter = ctx.obj["output_formatter"]

    try:
        if profile_name:
            profile = config_manager.get_profile(profile_name)
        else:
            profile = ctx.obj.get("profile")
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    info = {
        "config_file": str(config_manager.config_file),
        "config_exists": config_manager.config_file.exists(),
        "environment": {
            ENV_SITE_URL: os.getenv(ENV_SITE_URL),
            ENV_USERNAME: os.getenv(ENV_USERNAME),
            ENV_APP_PASSWORD: "set" if os.getenv(ENV_APP_PASSWORD) else None,
        },
        "profile": profile.model_dump(exclude={"app_password"}) if profile else None,
    }

    if ctx.obj["output_format"] in ["json", "yaml"]:
        formatter.render(info, format=ctx.obj["output_format"])
        return

    console.print(f"[bold]Configuration file:[/bold] {info['config_file']}")
    console.print(f"  Exists: {'Yes' if info['config_exists'] else 'No'}")

    console.print("\n[bold]Environment:[/bold]")
    for var, value in info["environment"].items():
        console.print(f"  {var}: {value or '[dim]not set[/dim]'}")

    if profile is None:
        console.print("\n[yellow]No active profile[/yellow]")
        return

    console.print(f"\n[bold]Profile:[/bold] {profile.name}")
    for key, value in info["profile"].items():
        if key == "name":
            continue
        console.print(f"  {key}: {value if value is not None else '—'}", markup=False)
