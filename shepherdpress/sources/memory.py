"""Content source backed by a local YAML or JSON file.

Used for offline rendering and tests. The file layout is::

    posts:
      - {id: 1, title: ..., slug: ..., published_at: ..., categories: [recent-news]}
    pages:
      - {id: 10, title: ..., slug: ..., parent: null, content: ...}
    staff:
      - {id: 100, menu_order: 1, fields: {full_name: ..., position: ..., write_up: ..., image: {url: ...}}}
    menu:
      - {title: About, url: /about/, children: [{title: Staff, url: /staff/}]}
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigError, ContentNotFoundError, ValidationError
from ..models.menu import MenuItem
from ..models.post import Ancestor, NewsPost, Page
from ..models.staff import StaffRecord


class MemoryContentSource:
    """In-memory content store implementing ``ContentSource``."""

    def __init__(
        self,
        posts: Optional[List[NewsPost]] = None,
        pages: Optional[List[Page]] = None,
        staff_fields: Optional[Dict[int, Dict[str, Any]]] = None,
        staff_order: Optional[Dict[int, int]] = None,
        menu: Optional[List[MenuItem]] = None,
    ) -> None:
        self._posts = list(posts or [])
        self._pages = {page.id: page for page in pages or []}
        self._staff_fields = dict(staff_fields or {})
        self._staff_order = dict(staff_order or {})
        self._menu = list(menu or [])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MemoryContentSource":
        """Build a source from parsed content data.

        Raises:
            ValidationError: If a record does not match its model
        """
        try:
            posts = [NewsPost(**item) for item in data.get("posts") or []]
            pages = [Page(**item) for item in data.get("pages") or []]
            menu = [MenuItem(**item) for item in data.get("menu") or []]
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid content data: {e}")

        staff_fields: Dict[int, Dict[str, Any]] = {}
        staff_order: Dict[int, int] = {}
        for item in data.get("staff") or []:
            if "id" not in item:
                raise ValidationError("Staff entry is missing an id")
            record_id = int(item["id"])
            staff_fields[record_id] = dict(item.get("fields") or {})
            staff_order[record_id] = int(item.get("menu_order", 0))

        return cls(posts=posts, pages=pages, staff_fields=staff_fields, staff_order=staff_order, menu=menu)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "MemoryContentSource":
        """Load a source from a ``.yaml``/``.yml`` or ``.json`` file.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise ConfigError(f"Content file not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if file_path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load content file {file_path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Content file {file_path} must contain a mapping")

        return cls.from_dict(data)

    def get_posts_by_category(self, slug: str, limit: int) -> List[NewsPost]:
        slug = slug.lower()
        posts = [post for post in self._posts if slug in post.categories]
        posts.sort(key=lambda post: post.published_at, reverse=True)
        return posts[:max(limit, 0)]

    def get_page(self, page_id: int) -> Page:
        if page_id not in self._pages:
            raise ContentNotFoundError("page", page_id)
        return self._pages[page_id]

    def get_ancestors(self, page_id: int) -> List[Ancestor]:
        ancestors: List[Ancestor] = []
        seen = {page_id}
        parent_id = self.get_page(page_id).parent

        while parent_id is not None:
            if parent_id in seen:
                raise ValidationError(f"Page hierarchy of '{page_id}' contains a cycle")
            seen.add(parent_id)
            parent = self.get_page(parent_id)
            ancestors.append(Ancestor(id=parent.id, title=parent.title, link=parent.link))
            parent_id = parent.parent

        return ancestors

    def get_staff(self) -> List[StaffRecord]:
        ids = sorted(self._staff_fields, key=lambda i: (self._staff_order.get(i, 0), i))
        return [
            StaffRecord.from_fields(i, self._staff_fields[i], menu_order=self._staff_order.get(i, 0))
            for i in ids
        ]

    def get_custom_fields(self, record_id: int) -> Dict[str, Any]:
        if record_id not in self._staff_fields:
            raise ContentNotFoundError("staff record", record_id)
        return dict(self._staff_fields[record_id])

    def get_menu(self) -> List[MenuItem]:
        return list(self._menu)
