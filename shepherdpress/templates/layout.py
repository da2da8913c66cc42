"""Mobile menu layout and the wrapper markup it implies.

The off-canvas layout wraps the whole page body. Both the opening and the
closing half of the wrapper come from this module so the header and the
footer cannot disagree on the layout.
"""

from enum import Enum
from typing import List, Optional

from ..customizer import MOBILE_MENU_LAYOUT_KEY
from ..models.menu import MenuItem
from ..models.settings import SiteSettings
from ..utils.html import esc_url


class MobileMenuLayout(str, Enum):
    TOPBAR = "topbar"
    OFFCANVAS = "offcanvas"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "MobileMenuLayout":
        """Map a stored value to a layout; anything unrecognised is topbar."""
        try:
            return cls(value)
        except ValueError:
            return cls.TOPBAR

    @classmethod
    def from_settings(cls, settings: SiteSettings) -> "MobileMenuLayout":
        return cls.from_value(settings.get(MOBILE_MENU_LAYOUT_KEY))

    @property
    def body_class(self) -> str:
        return self.value

    def wrapper_open(self, menu: List[MenuItem]) -> str:
        if self is not MobileMenuLayout.OFFCANVAS:
            return ""
        return (
            '\t<div class="off-canvas-wrapper">\n'
            '\t\t<div class="off-canvas-wrapper-inner" data-off-canvas-wrapper>\n'
            '\t\t<nav class="off-canvas position-left" id="mobile-menu" data-off-canvas data-position="left" role="navigation">\n'
            f"{render_menu(menu, 'vertical menu', 'data-accordion-menu', indent=3)}"
            "\t\t</nav>\n"
            '\t\t<div class="off-canvas-content" data-off-canvas-content>\n'
        )

    def wrapper_close(self) -> str:
        if self is not MobileMenuLayout.OFFCANVAS:
            return ""
        return (
            "\t\t</div><!-- Close off-canvas content wrapper -->\n"
            "\t\t</div><!-- Close off-canvas wrapper inner -->\n"
            "\t</div><!-- Close off-canvas wrapper -->\n"
        )


def render_menu(items: List[MenuItem], css_class: str, attributes: str = "", indent: int = 0) -> str:
    """Nested ``<ul>`` of menu items."""
    pad = "\t" * indent
    attrs = f" {attributes}" if attributes else ""
    lines = [f'{pad}<ul class="{css_class}"{attrs}>']
    for item in items:
        link = f'<a href="{esc_url(item.url)}">{item.title}</a>'
        if item.children:
            lines.append(f"{pad}\t<li>{link}")
            lines.append(render_menu(item.children, "menu vertical nested", indent=indent + 2).rstrip("\n"))
            lines.append(f"{pad}\t</li>")
        else:
            lines.append(f"{pad}\t<li>{link}</li>")
    lines.append(f"{pad}</ul>")
    return "\n".join(lines) + "\n"
