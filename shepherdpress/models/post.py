"""Post and Page models for the church site."""

from datetime import datetime, timezone
from typing import List, Optional, Dict
from pydantic import BaseModel, field_validator
from typing_extensions import Literal


class FeaturedImage(BaseModel):
    """Featured image attached to a post."""

    url: str
    alt: str = ""
    # size name -> url, e.g. {"medium": ".../img-300x200.jpg"}
    sizes: Dict[str, str] = {}


class Tag(BaseModel):
    """Tag attached to a page."""

    name: str
    slug: str
    link: str = "#"


class Comment(BaseModel):
    """Approved comment shown under a page."""

    id: int
    author: str
    date: datetime
    content: str
    author_url: Optional[str] = None


class NewsPost(BaseModel):
    """Published news post."""

    id: int
    title: str
    slug: str
    published_at: datetime
    categories: List[str] = []
    link: str = "#"
    featured_image: Optional[FeaturedImage] = None

    @field_validator("published_at")
    @classmethod
    def normalize_published_at(cls, v: datetime) -> datetime:
        """Offset-aware dates are shifted to UTC and stored naive so posts sort together."""
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @field_validator("categories")
    @classmethod
    def normalize_categories(cls, v: List[str]) -> List[str]:
        """Category slugs are compared lowercase."""
        return [slug.lower() for slug in v]


class Ancestor(BaseModel):
    """One entry of a page's ancestor chain."""

    id: int
    title: str
    link: str


class Page(BaseModel):
    """Site page rendered by the full-width template."""

    id: int
    title: str
    slug: str
    content: str = ""
    link: str = "#"
    parent: Optional[int] = None
    tags: List[Tag] = []
    comments: List[Comment] = []
    comment_status: Literal["open", "closed"] = "closed"

    @field_validator("parent")
    @classmethod
    def validate_parent(cls, v: Optional[int]) -> Optional[int]:
        """WordPress reports top-level pages with parent 0."""
        if v == 0:
            return None
        return v
