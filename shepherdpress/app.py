"""Main Typer application for ShepherdPress CLI.

This module contains the main Typer app instance and registers all command
groups. It provides the entry point for the CLI and handles global options
like profile, debug mode, output formatting, and the settings and content
files a render reads.
"""

import os
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.traceback import install

from . import __version__
from .config import ENV_APP_PASSWORD, ENV_SITE_URL, ENV_USERNAME, ConfigManager, Profile
from .content_types import build_content_types
from .customizer import build_registry
from .exceptions import ConfigError
from .render import OutputFormatter

# Install rich traceback handler for better error display
install(show_locals=False)

ENV_CONFIG_DIR = "SHEPHERDPRESS_CONFIG_DIR"

app = typer.Typer(
    name="shepherdpress",
    help="Render and configure the Good Shepherd church theme",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"shepherdpress {__version__}")
        raise typer.Exit()


def show_environment_info() -> None:
    console.print("[dim]Environment variables:[/dim]")
    env_vars = {
        ENV_SITE_URL: os.getenv(ENV_SITE_URL, "[not set]"),
        ENV_USERNAME: os.getenv(ENV_USERNAME, "[not set]"),
        ENV_APP_PASSWORD: "[set]" if os.getenv(ENV_APP_PASSWORD) else "[not set]",
    }

    for var, value in env_vars.items():
        console.print(f"  {var}: {value}", markup=False, style="dim")


def load_profile(config_manager: ConfigManager, name: Optional[str], debug: bool) -> Optional[Profile]:
    """Named profile, else the active one, else one built from the environment.

    Raises:
        ConfigError: If a named profile does not exist
    """
    if name:
        return config_manager.get_profile(name)

    try:
        return config_manager.get_default_profile()
    except ConfigError:
        pass

    if not config_manager.has_environment_config():
        return None

    try:
        profile = Profile(**config_manager.get_environment_config())
    except ValueError as e:
        if debug:
            console.print(f"[dim]Failed to create profile from environment: {e}[/dim]")
        return None

    if debug:
        console.print("[dim]Created temporary profile from environment variables[/dim]")
    return profile


# Global options
@app.callback()
def main(
    ctx: typer.Context,
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Site profile to use",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format (table, json, yaml)",
    ),
    settings_file: Optional[Path] = typer.Option(
        None,
        "--settings",
        help="YAML file with stored setting values",
    ),
    content_file: Optional[Path] = typer.Option(
        None,
        "--content",
        help="YAML/JSON content file to render from",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        envvar=ENV_CONFIG_DIR,
        help="Configuration directory (default: ~/.shepherdpress)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """ShepherdPress - render and configure the Good Shepherd church theme.

    Examples:
        # Change the phone number shown in the footer
        shepherdpress settings set footer_text_telephone "555-0100"

        # Render the front page from a local content file
        shepherdpress --content content.yaml render front --out index.html

        # Render a page from the active profile's WordPress site
        shepherdpress render page 12
    """
    try:
        config_manager = ConfigManager(config_dir)
        profile_obj = load_profile(config_manager, profile, debug)
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["output_format"] = output_format
    ctx.obj["settings_file"] = settings_file
    ctx.obj["content_file"] = content_file
    ctx.obj["console"] = console
    ctx.obj["config_manager"] = config_manager
    ctx.obj["output_formatter"] = OutputFormatter(console)
    ctx.obj["profile"] = profile_obj
    ctx.obj["registry"] = build_registry()
    ctx.obj["content_types"] = build_content_types()

    if debug:
        console.print("[dim]Debug mode enabled[/dim]")
        show_environment_info()
        if profile_obj:
            console.print(f"[dim]Using profile: {profile_obj.name}[/dim]")
        else:
            console.print("[dim]No profile in use[/dim]")


def register_commands() -> None:
    """Register all command groups with the main app."""
    from .cmds import config_app, render_app, settings_app, types_app

    app.add_typer(settings_app, name="settings", help="View and change theme settings")
    app.add_typer(render_app, name="render", help="Render templates to HTML")
    app.add_typer(config_app, name="config", help="Manage site profiles")
    app.add_typer(types_app, name="types", help="Inspect registered content types")


register_commands()


def cli() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli()
