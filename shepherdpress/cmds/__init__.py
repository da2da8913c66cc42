"""Command modules for ShepherdPress CLI.

This module exports all command groups (Typer apps) that can be registered
with the main application.
"""

from .config import app as config_app
from .render import app as render_app
from .settings import app as settings_app
from .types import app as types_app

__all__ = [
    "config_app",
    "render_app",
    "settings_app",
    "types_app",
]
