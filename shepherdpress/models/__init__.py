"""Data models for ShepherdPress.

This package contains Pydantic models for the church site's content
(news posts, pages, staff records), the customizer schema and the
content-type declarations.
"""

from .post import NewsPost, Page, Ancestor, FeaturedImage, Tag, Comment
from .staff import StaffRecord, StaffImage
from .menu import MenuItem
from .settings import (
    PanelDefinition,
    SectionDefinition,
    SettingDefinition,
    ControlDefinition,
    SiteSettings,
)
from .content_type import ContentTypeDefinition, ContentTypeLabels


__all__ = [
    # Content
    "NewsPost",
    "Page",
    "Ancestor",
    "FeaturedImage",
    "Tag",
    "Comment",
    "StaffRecord",
    "StaffImage",
    "MenuItem",

    # Customizer schema
    "PanelDefinition",
    "SectionDefinition",
    "SettingDefinition",
    "ControlDefinition",
    "SiteSettings",

    # Content types
    "ContentTypeDefinition",
    "ContentTypeLabels",
]
