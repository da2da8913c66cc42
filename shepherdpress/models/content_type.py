"""Content type declaration model."""

import re
from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import Literal


class ContentTypeLabels(BaseModel):
    """Admin labels of a content type."""

    model_config = ConfigDict(frozen=True)

    name: str
    singular_name: str


class ContentTypeDefinition(BaseModel):
    """Custom content type registered with the host."""

    model_config = ConfigDict(frozen=True)

    name: str
    labels: ContentTypeLabels
    public: bool = True
    has_archive: bool = False
    hierarchical: bool = False
    show_in_nav_menus: bool = True
    capability_type: Literal["post", "page"] = "post"

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Type keys are at most 20 lowercase characters, digits, dashes or underscores."""
        if not re.match(r"^[a-z0-9_-]{1,20}$", v):
            raise ValueError("Content type name must be 1-20 lowercase alphanumeric, dash or underscore characters")
        return v
