"""Customizer schema models and the resolved site settings snapshot."""

from types import MappingProxyType
from typing import Dict, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from typing_extensions import Literal

from ..exceptions import SettingNotRegisteredError


class PanelDefinition(BaseModel):
    """Group of customizer sections."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    priority: int = 160


class SectionDefinition(BaseModel):
    """Group of customizer controls, optionally inside a panel."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    priority: int = 160
    panel: Optional[str] = None


class SettingDefinition(BaseModel):
    """Stored setting with its literal default.

    ``theme_mod`` settings are stored per theme, ``option`` settings site
    wide. Capability defaults follow the storage type.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    default: str = ""
    type: Literal["theme_mod", "option"] = "theme_mod"
    capability: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("capability")
    @classmethod
    def default_capability(cls, v: Optional[str], info: ValidationInfo) -> str:
        """Fill in the capability implied by the storage type."""
        if v is None:
            return "manage_options" if info.data.get("type") == "option" else "edit_theme_options"
        return v


class ControlDefinition(BaseModel):
    """Admin UI control bound to one setting."""

    model_config = ConfigDict(frozen=True)

    id: str
    section: str
    settings: str
    label: str = ""
    type: Literal["text", "textarea", "url", "radio"] = "text"
    choices: Dict[str, str] = Field(default_factory=dict)

    @field_validator("choices")
    @classmethod
    def validate_choices(cls, v: Dict[str, str], info: ValidationInfo) -> Dict[str, str]:
        """Only radio controls carry choices."""
        control_type = info.data.get("type", "text")
        if v and control_type != "radio":
            raise ValueError("Only radio controls accept choices")
        return v

    @model_validator(mode="after")
    def radio_needs_choices(self) -> "ControlDefinition":
        if self.type == "radio" and not self.choices:
            raise ValueError("Radio controls need at least one choice")
        return self


class SiteSettings:
    """Read-only settings resolved once per render.

    A key present in the stored mapping wins, even when its value is the
    empty string. Absent keys (or keys stored as ``None``) fall back to the
    registered literal default.
    """

    def __init__(
        self,
        definitions: Mapping[str, SettingDefinition],
        stored: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        stored = stored or {}
        values: Dict[str, str] = {}
        for key, definition in definitions.items():
            value = stored.get(key)
            values[key] = definition.default if value is None else str(value)

        self._values = MappingProxyType(values)
        self._overridden = frozenset(
            key for key in definitions if stored.get(key) is not None
        )

    def get(self, key: str) -> str:
        """Get the resolved value of a registered setting.

        Raises:
            SettingNotRegisteredError: If ``key`` has no definition
        """
        try:
            return self._values[key]
        except KeyError:
            raise SettingNotRegisteredError(key) from None

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def is_overridden(self, key: str) -> bool:
        """Whether ``key`` comes from the store rather than its default."""
        if key not in self._values:
            raise SettingNotRegisteredError(key)
        return key in self._overridden

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)
