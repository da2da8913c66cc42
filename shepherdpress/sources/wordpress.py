"""WordPress REST API content source.

Fetches news posts, pages, page ancestry, staff custom fields and the
primary menu from a live site's ``/wp-json/wp/v2`` endpoints. Custom
fields are read from the ``acf`` key that Advanced Custom Fields adds to
REST records.
"""

import os
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

import requests
from pydantic import ValidationError as PydanticValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import ENV_APP_PASSWORD, ENV_SITE_URL, ENV_USERNAME, Profile
from ..content_types import STAFF_TYPE
from ..exceptions import (
    BadRequestError,
    ContentNotFoundError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from ..models.menu import MenuItem
from ..models.post import Ancestor, Comment, FeaturedImage, NewsPost, Page, Tag
from ..models.staff import StaffRecord
from ..utils.retry import RetryManager

API_PREFIX = "/wp-json/wp/v2"
MAX_PER_PAGE = 100
MENU_LOCATION = "top-bar-r"


class WordPressContentSource:
    """``ContentSource`` backed by the WordPress REST API."""

    def __init__(
        self,
        profile: Optional[Profile] = None,
        url: Optional[str] = None,
        username: Optional[str] = None,
        app_password: Optional[str] = None,
        timeout: int = 30,
        retry_attempts: int = 3,
        debug: bool = False,
    ) -> None:
        """Initialize the REST source.

        Environment variables override profile values, as they do for the CLI.

        Raises:
            ValueError: If no site URL can be determined
        """
        env_url = os.getenv(ENV_SITE_URL)
        env_username = os.getenv(ENV_USERNAME)
        env_password = os.getenv(ENV_APP_PASSWORD)

        if profile:
            base_url = env_url or (str(profile.url) if profile.url else None)
            username = env_username or profile.username
            app_password = env_password or profile.app_password
            timeout = profile.timeout
            retry_attempts = profile.retry_attempts
        else:
            base_url = env_url or url
            username = env_username or username
            app_password = env_password or app_password

        if not base_url:
            raise ValueError(f"Either a profile with a URL, url parameter, or {ENV_SITE_URL} must be provided")

        self.url = base_url.rstrip("/")
        self.timeout = timeout
        self.debug = debug

        self.retry_manager = RetryManager(
            max_retries=retry_attempts,
            base_delay=1.0,
            max_delay=30.0,
            backoff_factor=2.0,
            jitter=True,
        )

        self.session = requests.Session()
        if username and app_password:
            self.session.auth = (username, app_password.replace(" ", ""))
        self._configure_session()

    def _configure_session(self) -> None:
        # Connection-level retries only; HTTP status retries go through RetryManager
        retry_strategy = Retry(total=0, connect=2, read=2, backoff_factor=0.5)
        adapter = HTTPAdapter(max_retries=retry_strategy, pool_connections=10, pool_maxsize=20)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def _handle_response(self, response: requests.Response) -> requests.Response:
        """Convert error responses to exceptions.

        Raises:
            APIError: For various HTTP error conditions
        """
        if response.status_code < 400:
            return response

        error_data: Dict[str, Any] = {}
        try:
            error_data = response.json()
        except ValueError:
            pass

        message = error_data.get("message") if isinstance(error_data, dict) else None
        status = response.status_code

        if status == 400:
            raise BadRequestError(message or "Bad request", status_code=status, response_data=error_data)
        if status == 401:
            raise UnauthorizedError(
                message or "Unauthorized - check your application password",
                status_code=status,
                response_data=error_data,
            )
        if status == 403:
            raise ForbiddenError(
                message or "Forbidden - insufficient permissions",
                status_code=status,
                response_data=error_data,
            )
        if status == 404:
            raise NotFoundError(message or "Resource not found", status_code=status, response_data=error_data)
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                "Rate limit exceeded",
                status_code=status,
                response_data=error_data,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        if status >= 500:
            raise ServerError(f"Server error: {status}", status_code=status, response_data=error_data)

        raise BadRequestError(message or f"Unexpected status {status}", status_code=status, response_data=error_data)

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> requests.Response:
        """Make an API request with retry logic and error handling."""
        def make_request() -> requests.Response:
            if self.debug:
                print(f"[DEBUG] Making {method} request to {self.url}{endpoint}")
                if kwargs.get("params"):
                    print(f"[DEBUG] Params: {kwargs['params']}")

            response = self.session.request(
                method=method,
                url=f"{self.url}{endpoint}",
                timeout=self.timeout,
                **kwargs,
            )

            if self.debug:
                print(f"[DEBUG] Response status: {response.status_code}")

            return self._handle_response(response)

        return self.retry_manager.execute_with_retry(make_request)

    def _get_json(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", endpoint, params=params or {}).json()

    def _get_all(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Iterator[Dict[str, Any]]:
        """Yield items of every page of a collection endpoint."""
        page = 1
        while True:
            page_params = dict(params or {})
            page_params.update({"per_page": MAX_PER_PAGE, "page": page})
            response = self._request("GET", endpoint, params=page_params)

            items = response.json()
            if not items:
                break
            yield from items

            total_pages = response.headers.get("X-WP-TotalPages", "1")
            if not total_pages.isdigit() or page >= int(total_pages):
                break
            page += 1

    def get_category_id(self, slug: str) -> Optional[int]:
        categories = self._get_json(f"{API_PREFIX}/categories", {"slug": slug})
        if not categories:
            return None
        return int(categories[0]["id"])

    def get_posts_by_category(self, slug: str, limit: int) -> List[NewsPost]:
        """Newest published posts of a category.

        Raises:
            ValidationError: If the site returns a post the models reject
        """
        if limit <= 0:
            return []

        category_id = self.get_category_id(slug)
        if category_id is None:
            return []

        items = self._get_json(
            f"{API_PREFIX}/posts",
            {
                "categories": category_id,
                "per_page": min(limit, MAX_PER_PAGE),
                "orderby": "date",
                "order": "desc",
                "status": "publish",
                "_embed": "wp:featuredmedia",
            },
        )
        return [self._parse_post(item, slug) for item in items[:limit]]

    def _parse_post(self, item: Dict[str, Any], category: str) -> NewsPost:
        try:
            return NewsPost(
                id=item["id"],
                title=_rendered(item.get("title")),
                slug=item["slug"],
                published_at=datetime.fromisoformat(item["date"]),
                categories=[category],
                link=item.get("link") or "#",
                featured_image=_parse_featured_media(item),
            )
        # fromisoformat raises plain ValueError
        except (PydanticValidationError, KeyError, ValueError) as e:
            raise ValidationError(f"Invalid post {item.get('id')} from {self.url}: {e}")

    def _get_page_json(self, page_id: int) -> Dict[str, Any]:
        try:
            return self._get_json(f"{API_PREFIX}/pages/{page_id}", {"_embed": "wp:term"})
        except NotFoundError:
            raise ContentNotFoundError("page", page_id)

    def get_page(self, page_id: int) -> Page:
        """Page with its tags and approved comments.

        Raises:
            ContentNotFoundError: If the page does not exist
            ValidationError: If the site returns a record the models reject
        """
        item = self._get_page_json(page_id)
        raw_comments = list(self._get_all(f"{API_PREFIX}/comments", {"post": page_id, "order": "asc"}))

        try:
            return self._parse_page(item, raw_comments)
        except (PydanticValidationError, KeyError, ValueError) as e:
            raise ValidationError(f"Invalid page {page_id} from {self.url}: {e}")

    def _parse_page(self, item: Dict[str, Any], raw_comments: List[Dict[str, Any]]) -> Page:
        tags = []
        for terms in (item.get("_embedded") or {}).get("wp:term", []):
            for term in terms:
                if term.get("taxonomy") == "post_tag":
                    tags.append(Tag(name=term["name"], slug=term["slug"], link=term.get("link") or "#"))

        comments = []
        for comment in raw_comments:
            comments.append(
                Comment(
                    id=comment["id"],
                    author=comment.get("author_name") or "Anonymous",
                    author_url=comment.get("author_url") or None,
                    date=datetime.fromisoformat(comment["date"]),
                    content=_rendered(comment.get("content")),
                )
            )

        return Page(
            id=item["id"],
            title=_rendered(item.get("title")),
            slug=item["slug"],
            content=_rendered(item.get("content")),
            link=item.get("link") or "#",
            parent=item.get("parent") or None,
            tags=tags,
            comments=comments,
            comment_status=item.get("comment_status", "closed"),
        )

    def get_ancestors(self, page_id: int) -> List[Ancestor]:
        ancestors: List[Ancestor] = []
        seen = {page_id}
        parent_id = self._get_page_json(page_id).get("parent") or None

        while parent_id is not None:
            if parent_id in seen:
                raise ValidationError(f"Page hierarchy of '{page_id}' contains a cycle")
            seen.add(parent_id)
            parent = self._get_page_json(parent_id)
            ancestors.append(
                Ancestor(id=parent["id"], title=_rendered(parent.get("title")), link=parent.get("link") or "#")
            )
            parent_id = parent.get("parent") or None

        return ancestors

    def get_staff(self) -> List[StaffRecord]:
        records = [
            StaffRecord.from_fields(item["id"], item.get("acf") or {}, menu_order=item.get("menu_order", 0))
            for item in self._get_all(f"{API_PREFIX}/{STAFF_TYPE}", {"orderby": "menu_order", "order": "asc"})
        ]
        return sorted(records, key=lambda r: (r.menu_order, r.id))

    def get_custom_fields(self, record_id: int) -> Dict[str, Any]:
        try:
            item = self._get_json(f"{API_PREFIX}/{STAFF_TYPE}/{record_id}")
        except NotFoundError:
            raise ContentNotFoundError("staff record", record_id)
        return dict(item.get("acf") or {})

    def get_menu(self) -> List[MenuItem]:
        """Items of the menu assigned to the theme's top bar location.

        Sites without the location, or older than the menu endpoints, yield
        an empty menu.

        Raises:
            ValidationError: If the site returns an item the models reject
        """
        try:
            location = self._get_json(f"{API_PREFIX}/menu-locations/{MENU_LOCATION}")
        except NotFoundError:
            return []

        menu_id = location.get("menu") if isinstance(location, dict) else None
        if not menu_id:
            return []

        items = list(self._get_all(f"{API_PREFIX}/menu-items", {"menus": menu_id}))
        try:
            return _build_menu_tree(items)
        except (PydanticValidationError, KeyError) as e:
            raise ValidationError(f"Invalid menu {menu_id} from {self.url}: {e}")


def _rendered(field: Any) -> str:
    """REST text fields come as ``{"rendered": ...}``."""
    if isinstance(field, dict):
        return field.get("rendered") or ""
    return field or ""


def _parse_featured_media(item: Dict[str, Any]) -> Optional[FeaturedImage]:
    media = (item.get("_embedded") or {}).get("wp:featuredmedia") or []
    if not media or not media[0].get("source_url"):
        return None

    attachment = media[0]
    sizes = {
        name: size["source_url"]
        for name, size in ((attachment.get("media_details") or {}).get("sizes") or {}).items()
        if size.get("source_url")
    }
    return FeaturedImage(url=attachment["source_url"], alt=attachment.get("alt_text") or "", sizes=sizes)


def _build_menu_tree(items: List[Dict[str, Any]]) -> List[MenuItem]:
    """Nest flat menu items under their ``parent`` in ``menu_order``."""
    ordered = sorted(items, key=lambda item: (item.get("menu_order", 0), item["id"]))
    children: Dict[int, List[Dict[str, Any]]] = {}
    for item in ordered:
        children.setdefault(item.get("parent") or 0, []).append(item)

    def build(parent_id: int) -> List[MenuItem]:
        return [
            MenuItem(title=_rendered(item.get("title")), url=item.get("url") or "#", children=build(item["id"]))
            for item in children.get(parent_id, [])
        ]

    return build(0)
