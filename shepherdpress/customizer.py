"""Customizer settings registrar.

Declares every setting the templates read: its literal default, storage
type, admin control and grouping into panels and sections. Registration
callbacks run against a ``CustomizerRegistry`` the same way the host runs
``customize_register`` handlers.
"""

from typing import Callable, Dict, List, Mapping, Optional

from .exceptions import RegistrationError, SettingNotRegisteredError, ValidationError
from .models.settings import (
    ControlDefinition,
    PanelDefinition,
    SectionDefinition,
    SettingDefinition,
    SiteSettings,
)

MOBILE_MENU_LAYOUT_KEY = "wpt_mobile_menu_layout"
FRONT_PAGE_TILE_COUNT = 4

FOOTER_DEFAULTS = {
    "footer_text_address": ("Address", "231 N. Church St, Rocky Mount, NC 27804"),
    "footer_text_telephone": ("Footer Text Telephone Number", "252.442.1134"),
    "footer_text_1": (
        "Footer Text Copyright",
        "© Copyright 2016, Good Shepherd Episcopal Church. All rights reserved.",
    ),
    "footer_text_disclosure": (
        "Footer Text Line Disclosure",
        "The Church of the Good Shepherd and the Good Shepherd Day School are equal opportunity "
        "employers. The USDA is an equal opportunity provider and employer.",
    ),
    "footer_text_cal_link": ("Footer Text Calendar Link", "/resources/calendar/"),
    "footer_text_map_link": (
        "Footer Text Map Link",
        "https://www.google.com/maps/place/231+N+Church+St,+Rocky+Mount,+NC+27804/@35.9458229,-77.7978464,17z",
    ),
    "footer_text_dio_link": ("Footer Text Diocese Link", "http://www.dionc.org/"),
    "footer_text_facebook_link": (
        "Footer Text Facebook Link",
        "https://www.facebook.com/Church-of-the-Good-Shepherd-Episcopal-Rocky-Mount-NC-246208660494/",
    ),
    "footer_text_twitter_link": ("Footer Text Twitter Link", "#"),
    "footer_text_email_link": (
        "Footer Text Email Sign Up Link",
        "https://visitor.r20.constantcontact.com/manage/optin?v=0013sqtWUZpMnGEoYXgaI4TjrWS8kwiVGsJyaaDpJuVzJUAGhvXxkn-"
        "FhoYVYjEZJa2iz0H_ypgScIPhr3vqO-31z9D-EOP9vDFKAeRqsEIJGfsonI2Mwwv8G4VV0vNvw5DDR3z3XnNDfXYR6_TspcweAIvnLS-"
        "zyryAOZKBN925LE%3D",
    ),
}

# (text, link, icon) per tile, in display order
FRONT_PAGE_TILE_DEFAULTS = [
    ("Upcoming Events", "/calendar", "fa-calendar"),
    ("LECTIONARY READINGS", "#", "fa-book"),
    ("Online Donations", "#", "fa-heart"),
    ("Annual Report 2014", "#", "fa-file-text-o"),
]

DEFAULT_SLIDER_SHORTCODE = "[metaslider id=14]"


class CustomizerRegistry:
    """Holds panels, sections, settings and controls declared by the theme."""

    def __init__(self) -> None:
        self._panels: Dict[str, PanelDefinition] = {}
        self._sections: Dict[str, SectionDefinition] = {}
        self._settings: Dict[str, SettingDefinition] = {}
        self._controls: Dict[str, ControlDefinition] = {}

    def add_panel(self, panel_id: str, **kwargs) -> PanelDefinition:
        if panel_id in self._panels:
            raise RegistrationError(f"Panel '{panel_id}' is already registered")
        panel = PanelDefinition(id=panel_id, **kwargs)
        self._panels[panel_id] = panel
        return panel

    def add_section(self, section_id: str, **kwargs) -> SectionDefinition:
        if section_id in self._sections:
            raise RegistrationError(f"Section '{section_id}' is already registered")
        section = SectionDefinition(id=section_id, **kwargs)
        if section.panel is not None and section.panel not in self._panels:
            raise RegistrationError(
                f"Section '{section_id}' references unknown panel '{section.panel}'"
            )
        self._sections[section_id] = section
        return section

    def add_setting(self, setting_id: str, **kwargs) -> SettingDefinition:
        if setting_id in self._settings:
            raise RegistrationError(f"Setting '{setting_id}' is already registered")
        setting = SettingDefinition(id=setting_id, **kwargs)
        self._settings[setting_id] = setting
        return setting

    def add_control(self, control_id: str, **kwargs) -> ControlDefinition:
        """Register a control.

        The bound setting defaults to ``control_id`` as in the host API.
        """
        if control_id in self._controls:
            raise RegistrationError(f"Control '{control_id}' is already registered")
        kwargs.setdefault("settings", control_id)
        control = ControlDefinition(id=control_id, **kwargs)

        if control.section not in self._sections:
            raise RegistrationError(
                f"Control '{control_id}' references unknown section '{control.section}'"
            )
        if control.settings not in self._settings:
            raise RegistrationError(
                f"Control '{control_id}' references unknown setting '{control.settings}'"
            )
        if control.choices:
            default = self._settings[control.settings].default
            if default not in control.choices:
                raise RegistrationError(
                    f"Default '{default}' of setting '{control.settings}' is not one of its choices"
                )

        self._controls[control_id] = control
        return control

    @property
    def settings(self) -> Dict[str, SettingDefinition]:
        return dict(self._settings)

    def get_setting(self, setting_id: str) -> SettingDefinition:
        if setting_id not in self._settings:
            raise SettingNotRegisteredError(setting_id)
        return self._settings[setting_id]

    def get_control_for(self, setting_id: str) -> Optional[ControlDefinition]:
        """Find the control bound to a setting, if any."""
        for control in self._controls.values():
            if control.settings == setting_id:
                return control
        return None

    def panels(self) -> List[PanelDefinition]:
        return sorted(self._panels.values(), key=lambda p: p.priority)

    def sections(self, panel: Optional[str] = None) -> List[SectionDefinition]:
        """Sections ordered by priority, optionally limited to one panel."""
        sections = [s for s in self._sections.values() if panel is None or s.panel == panel]
        return sorted(sections, key=lambda s: s.priority)

    def controls(self, section: str) -> List[ControlDefinition]:
        """Controls of a section, in registration order."""
        return [c for c in self._controls.values() if c.section == section]

    def validate_value(self, setting_id: str, value: str) -> str:
        """Check a value before it is stored.

        Raises:
            SettingNotRegisteredError: If the setting is unknown
            ValidationError: If a radio setting gets a value outside its choices
        """
        self.get_setting(setting_id)
        control = self.get_control_for(setting_id)
        if control is not None and control.choices and value not in control.choices:
            choices = ", ".join(control.choices)
            raise ValidationError(
                f"Invalid value '{value}' for '{setting_id}'. Expected one of: {choices}",
                details={"setting": setting_id, "choices": list(control.choices)},
            )
        return value

    def resolve(self, stored: Optional[Mapping[str, Optional[str]]] = None) -> SiteSettings:
        """Resolve stored values against registered defaults."""
        return SiteSettings(self._settings, stored)

    def describe(self) -> List[Dict[str, str]]:
        """Flat listing of the schema, one row per setting."""
        rows = []
        for section in self.sections():
            for control in self.controls(section.id):
                setting = self._settings[control.settings]
                rows.append({
                    "setting": setting.id,
                    "section": section.id,
                    "panel": section.panel or "",
                    "label": control.label,
                    "control": control.type,
                    "type": setting.type,
                    "default": setting.default,
                })
        return rows


RegistrationCallback = Callable[[CustomizerRegistry], None]


def register_mobile_menu_customizer(registry: CustomizerRegistry) -> None:
    """Topbar or off-canvas choice for the mobile menu."""
    registry.add_panel(
        "mobile_menu_settings",
        title="Mobile Menu Settings",
        description="Controls the mobile menu",
        priority=1000,
    )
    registry.add_section(
        "mobile_menu_layout",
        title="Mobile navigation layout",
        panel="mobile_menu_settings",
        priority=1000,
    )
    registry.add_setting(MOBILE_MENU_LAYOUT_KEY, default="topbar")
    registry.add_control(
        "mobile_menu_layout",
        type="radio",
        section="mobile_menu_layout",
        settings=MOBILE_MENU_LAYOUT_KEY,
        choices={"topbar": "Topbar", "offcanvas": "Offcanvas"},
    )


def register_footer_customizer(registry: CustomizerRegistry) -> None:
    registry.add_section("custom_footer_text", title="Footer Text", priority=1100)
    for key, (label, default) in FOOTER_DEFAULTS.items():
        registry.add_setting(key, default=default, type="option")
        control_type = "url" if key.endswith("_link") else "text"
        registry.add_control(key, label=label, section="custom_footer_text", type=control_type)


def register_front_page_customizer(registry: CustomizerRegistry) -> None:
    registry.add_section("custom_front_page_links", title="Front Page Links", priority=1050)

    registry.add_setting("custom_fp_slider_shortcode", default=DEFAULT_SLIDER_SHORTCODE, type="option")
    registry.add_control(
        "custom_fp_slider_shortcode",
        label="Front Page Slider Shortcode",
        section="custom_front_page_links",
    )

    for number, (text, link, icon) in enumerate(FRONT_PAGE_TILE_DEFAULTS, start=1):
        for field, label, default in (
            ("text", "Custom Link Text", text),
            ("link", "Custom Link", link),
            ("icon", "Custom Link Icon", icon),
        ):
            key = f"custom_fp_{field}_{number}"
            registry.add_setting(key, default=default, type="option")
            registry.add_control(key, label=f"{label} {number}", section="custom_front_page_links")


def register_announcement_customizer(registry: CustomizerRegistry) -> None:
    registry.add_section(
        "header_announcement",
        title="Announcement Banner",
        description="Dismissible banner shown above the header. Leave empty to hide it.",
        priority=1020,
    )
    registry.add_setting("header_announcement_text", default="", type="option")
    registry.add_control(
        "header_announcement_text",
        label="Announcement Text",
        section="header_announcement",
        type="textarea",
    )


THEME_CUSTOMIZERS: List[RegistrationCallback] = [
    register_mobile_menu_customizer,
    register_announcement_customizer,
    register_front_page_customizer,
    register_footer_customizer,
]


def build_registry(callbacks: Optional[List[RegistrationCallback]] = None) -> CustomizerRegistry:
    """Run registration callbacks against a fresh registry.

    Args:
        callbacks: Callbacks to run. Defaults to the theme's own customizers.

    Returns:
        Populated registry
    """
    registry = CustomizerRegistry()
    for callback in THEME_CUSTOMIZERS if callbacks is None else callbacks:
        callback(registry)
    return registry
