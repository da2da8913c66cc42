"""Interfaces the renderers expect from the surrounding application."""

from typing import Any, Dict, List, Protocol, runtime_checkable

from .models.menu import MenuItem
from .models.post import Ancestor, NewsPost, Page
from .models.staff import StaffRecord

RECENT_NEWS_CATEGORY = "recent-news"


@runtime_checkable
class ContentSource(Protocol):
    """Read-only access to site content.

    Implementations resolve content however they like (a local file, the
    WordPress REST API); the templates only ever see the returned models.
    """

    def get_posts_by_category(self, slug: str, limit: int) -> List[NewsPost]:
        """Most recent posts of a category, newest first.

        An unknown category yields an empty list.
        """
        ...

    def get_page(self, page_id: int) -> Page:
        """Raises ContentNotFoundError when the page does not exist."""
        ...

    def get_ancestors(self, page_id: int) -> List[Ancestor]:
        """Ancestors of a page, immediate parent first, root last."""
        ...

    def get_staff(self) -> List[StaffRecord]:
        ...

    def get_custom_fields(self, record_id: int) -> Dict[str, Any]:
        ...

    def get_menu(self) -> List[MenuItem]:
        """Primary navigation, top level first; empty when the site has none."""
        ...
