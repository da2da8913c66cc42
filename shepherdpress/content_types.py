"""Content type registrar."""

from typing import Dict, List

from .exceptions import ContentNotFoundError
from .models.content_type import ContentTypeDefinition, ContentTypeLabels

STAFF_TYPE = "staff"


class ContentTypeRegistry:
    """Named content types declared by the theme.

    Registering a name twice replaces the earlier declaration, matching the
    host's behaviour.
    """

    def __init__(self) -> None:
        self._types: Dict[str, ContentTypeDefinition] = {}

    def register(self, definition: ContentTypeDefinition) -> ContentTypeDefinition:
        self._types[definition.name] = definition
        return definition

    def get(self, name: str) -> ContentTypeDefinition:
        if name not in self._types:
            raise ContentNotFoundError("content type", name)
        return self._types[name]

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def all(self) -> List[ContentTypeDefinition]:
        return list(self._types.values())


def register_staff_type(registry: ContentTypeRegistry) -> ContentTypeDefinition:
    """Declare the page-like staff type."""
    return registry.register(
        ContentTypeDefinition(
            name=STAFF_TYPE,
            labels=ContentTypeLabels(name="Staff", singular_name="Staff"),
            public=True,
            has_archive=True,
            hierarchical=True,
            show_in_nav_menus=True,
            capability_type="page",
        )
    )


def build_content_types() -> ContentTypeRegistry:
    registry = ContentTypeRegistry()
    register_staff_type(registry)
    return registry
