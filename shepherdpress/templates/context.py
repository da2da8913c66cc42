"""Per-render context handed to every template."""

from typing import List, Optional

from pydantic import BaseModel

from ..config import Profile
from ..hooks import HookRegistry
from ..models.menu import MenuItem
from ..models.settings import SiteSettings
from ..shortcodes import ShortcodeRegistry


class SiteInfo(BaseModel):
    """Site-wide values the header needs besides settings."""

    name: str = "Church of the Good Shepherd"
    home_url: str = "/"
    language: str = "en-US"
    charset: str = "UTF-8"
    assets_url: str = "/wp-content/themes/goodshepherd"

    @classmethod
    def from_profile(cls, profile: Profile) -> "SiteInfo":
        return cls(
            name=profile.site_name,
            home_url=profile.home_url,
            language=profile.language,
            charset=profile.charset,
            assets_url=profile.assets_url.rstrip("/"),
        )


class ThemeContext:
    """Everything a render reads apart from the content itself.

    Settings are resolved once and shared by every template of the render.
    """

    def __init__(
        self,
        settings: SiteSettings,
        site: Optional[SiteInfo] = None,
        hooks: Optional[HookRegistry] = None,
        shortcodes: Optional[ShortcodeRegistry] = None,
        menu: Optional[List[MenuItem]] = None,
    ) -> None:
        self.settings = settings
        self.site = site or SiteInfo()
        self.hooks = hooks or HookRegistry()
        self.shortcodes = shortcodes or ShortcodeRegistry()
        self.menu = list(menu or [])
