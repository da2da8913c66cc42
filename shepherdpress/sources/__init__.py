"""Content sources implementing the ``ContentSource`` port.

The factory picks a local content file when one is configured and falls
back to the WordPress REST API of the profile's site.
"""

import os
from pathlib import Path
from typing import Optional, Union

from rich.console import Console

from ..config import ENV_SITE_URL, Profile
from ..exceptions import ConfigError
from ..ports import ContentSource
from .memory import MemoryContentSource
from .wordpress import WordPressContentSource


def open_content_source(
    profile: Optional[Profile] = None,
    content_file: Optional[Union[str, Path]] = None,
    debug: bool = False,
    console: Optional[Console] = None,
) -> ContentSource:
    """Create the content source for a render.

    Args:
        profile: Active site profile
        content_file: Explicit content file, overrides the profile's
        debug: Whether to print diagnostics
        console: Console for diagnostics

    Returns:
        Configured content source

    Raises:
        ConfigError: If neither a content file nor a site URL is configured
    """
    console = console or Console(stderr=True)
    content_file = content_file or (profile.content_file if profile else None)

    if content_file:
        if debug:
            console.print(f"[dim]Reading content from {content_file}[/dim]")
        return MemoryContentSource.from_file(content_file)

    if os.getenv(ENV_SITE_URL) or (profile and profile.url):
        source = WordPressContentSource(profile=profile, debug=debug)
        if debug:
            console.print(f"[dim]Reading content from {source.url}[/dim]")
        return source

    raise ConfigError(
        "No content configured. Please either:\n"
        "  1. Pass --content with a YAML/JSON content file, or\n"
        "  2. Run 'shepherdpress config init --url ...' to point at a WordPress site, or\n"
        f"  3. Set the {ENV_SITE_URL} environment variable"
    )


__all__ = [
    "MemoryContentSource",
    "WordPressContentSource",
    "open_content_source",
]
