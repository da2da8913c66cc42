"""Integration tests for the WordPress REST content source.

HTTP traffic is mocked at the session level; the tests check request
shapes, response parsing, pagination and error mapping.
"""

from datetime import datetime
from unittest.mock import Mock

import pytest

from shepherdpress.config import ENV_APP_PASSWORD, ENV_SITE_URL, ENV_USERNAME, Profile
from shepherdpress.exceptions import (
    ContentNotFoundError,
    MaxRetriesExceededError,
    RateLimitError,
    UnauthorizedError,
    ValidationError,
)
from shepherdpress.ports import RECENT_NEWS_CATEGORY, ContentSource
from shepherdpress.sources import WordPressContentSource
from shepherdpress.utils.retry import RetryManager

SITE = "https://goodshepherd.example.org"


def make_response(data, status_code=200, headers=None):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = data
    response.headers = headers or {}
    return response


def make_page(page_id, title, parent=0, **extra):
    item = {
        "id": page_id,
        "title": {"rendered": title},
        "slug": title.lower(),
        "link": f"{SITE}/{title.lower()}/",
        "parent": parent,
        "content": {"rendered": f"<p>{title} content</p>"},
        "comment_status": "open",
    }
    item.update(extra)
    return item


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in (ENV_SITE_URL, ENV_USERNAME, ENV_APP_PASSWORD):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def source():
    source = WordPressContentSource(url=SITE, retry_attempts=0)
    source.session = Mock()
    return source


def routes(source, table):
    """Answer session requests by endpoint path."""
    def request(method, url, timeout, params=None):
        path = url[len(SITE):]
        handler = table[path]
        if isinstance(handler, Mock):
            return handler
        return handler(params or {})

    source.session.request.side_effect = request


class TestConstruction:
    def test_implements_port(self, source):
        assert isinstance(source, ContentSource)

    def test_requires_url(self):
        with pytest.raises(ValueError):
            WordPressContentSource()

    def test_profile_credentials(self):
        profile = Profile(
            name="live", url=SITE, username="editor", app_password="abcd EFGH 1234 ijkl MNOP 5678", timeout=5
        )

        source = WordPressContentSource(profile=profile)

        assert source.url == SITE
        assert source.timeout == 5
        assert source.session.auth == ("editor", "abcdEFGH1234ijklMNOP5678")

    def test_environment_overrides_profile(self, monkeypatch):
        monkeypatch.setenv(ENV_SITE_URL, "https://staging.example.org/")

        source = WordPressContentSource(profile=Profile(name="live", url=SITE))

        assert source.url == "https://staging.example.org"


class TestPosts:
    def test_recent_news(self, source):
        posts = [
            {
                "id": 7,
                "title": {"rendered": "Harvest Supper"},
                "slug": "harvest-supper",
                "date": "2016-09-05T18:00:00",
                "link": f"{SITE}/harvest-supper/",
                "_embedded": {
                    "wp:featuredmedia": [{
                        "source_url": f"{SITE}/supper.jpg",
                        "alt_text": "Tables",
                        "media_details": {"sizes": {"medium": {"source_url": f"{SITE}/supper-300x200.jpg"}}},
                    }]
                },
            },
            {"id": 6, "title": {"rendered": "Choir"}, "slug": "choir", "date": "2016-09-01T10:00:00"},
        ]
        routes(source, {
            "/wp-json/wp/v2/categories": make_response([{"id": 3, "slug": RECENT_NEWS_CATEGORY}]),
            "/wp-json/wp/v2/posts": make_response(posts),
        })

        result = source.get_posts_by_category(RECENT_NEWS_CATEGORY, 3)

        assert [p.id for p in result] == [7, 6]
        assert result[0].title == "Harvest Supper"
        assert result[0].published_at == datetime(2016, 9, 5, 18, 0)
        assert result[0].featured_image.sizes["medium"].endswith("supper-300x200.jpg")
        assert result[1].featured_image is None
        assert result[1].link == "#"

        params = source.session.request.call_args_list[1].kwargs["params"]
        assert params["categories"] == 3
        assert params["per_page"] == 3
        assert params["orderby"] == "date"

    def test_unknown_category(self, source):
        routes(source, {"/wp-json/wp/v2/categories": make_response([])})

        assert source.get_posts_by_category("missing", 3) == []
        assert source.session.request.call_count == 1

    def test_zero_limit_makes_no_request(self, source):
        assert source.get_posts_by_category(RECENT_NEWS_CATEGORY, 0) == []
        source.session.request.assert_not_called()

    def test_percent_encoded_slug(self, source):
        routes(source, {
            "/wp-json/wp/v2/categories": make_response([{"id": 3, "slug": RECENT_NEWS_CATEGORY}]),
            "/wp-json/wp/v2/posts": make_response([
                {"id": 8, "title": {"rendered": "Новости"}, "slug": "%d0%bd%d0%be%d0%b2", "date": "2016-09-05T18:00:00"},
            ]),
        })

        result = source.get_posts_by_category(RECENT_NEWS_CATEGORY, 3)

        assert result[0].slug == "%d0%bd%d0%be%d0%b2"

    def test_malformed_post(self, source):
        routes(source, {
            "/wp-json/wp/v2/categories": make_response([{"id": 3, "slug": RECENT_NEWS_CATEGORY}]),
            "/wp-json/wp/v2/posts": make_response([{"id": 9, "slug": "late", "date": "next tuesday"}]),
        })

        with pytest.raises(ValidationError) as exc_info:
            source.get_posts_by_category(RECENT_NEWS_CATEGORY, 3)

        assert "Invalid post 9" in str(exc_info.value)


class TestPages:
    def test_get_page_with_tags_and_comments(self, source):
        page = make_page(
            12,
            "Youth",
            parent=10,
            _embedded={"wp:term": [[
                {"taxonomy": "post_tag", "name": "Youth", "slug": "youth", "link": f"{SITE}/tag/youth/"},
                {"taxonomy": "category", "name": "News", "slug": "news"},
            ]]},
        )
        comment_pages = {
            1: [{"id": 1, "author_name": "Ann", "date": "2016-09-06T09:00:00", "content": {"rendered": "<p>Hi</p>"}}],
            2: [{"id": 2, "author_name": "", "author_url": "https://ann.example.org", "date": "2016-09-07T09:00:00",
                 "content": {"rendered": "<p>Again</p>"}}],
        }
        routes(source, {
            "/wp-json/wp/v2/pages/12": make_response(page),
            "/wp-json/wp/v2/comments": lambda params: make_response(
                comment_pages[params["page"]], headers={"X-WP-TotalPages": "2"}
            ),
        })

        result = source.get_page(12)

        assert result.title == "Youth"
        assert result.parent == 10
        assert result.content == "<p>Youth content</p>"
        assert [t.slug for t in result.tags] == ["youth"]
        assert [c.id for c in result.comments] == [1, 2]
        assert result.comments[1].author == "Anonymous"
        assert result.comments[1].author_url == "https://ann.example.org"

    def test_missing_page(self, source):
        routes(source, {"/wp-json/wp/v2/pages/99": make_response({"message": "Invalid page ID."}, 404)})

        with pytest.raises(ContentNotFoundError) as exc_info:
            source.get_page(99)

        assert exc_info.value.record_id == 99

    def test_malformed_page(self, source):
        routes(source, {
            "/wp-json/wp/v2/pages/12": make_response(make_page(12, "Youth", comment_status="maybe")),
            "/wp-json/wp/v2/comments": make_response([]),
        })

        with pytest.raises(ValidationError) as exc_info:
            source.get_page(12)

        assert "Invalid page 12" in str(exc_info.value)

    def test_ancestors_nearest_first(self, source):
        routes(source, {
            "/wp-json/wp/v2/pages/12": make_response(make_page(12, "Youth", parent=11)),
            "/wp-json/wp/v2/pages/11": make_response(make_page(11, "Ministries", parent=10)),
            "/wp-json/wp/v2/pages/10": make_response(make_page(10, "About")),
        })

        ancestors = source.get_ancestors(12)

        assert [a.title for a in ancestors] == ["Ministries", "About"]
        assert ancestors[1].link == f"{SITE}/about/"

    def test_ancestor_cycle(self, source):
        routes(source, {
            "/wp-json/wp/v2/pages/1": make_response(make_page(1, "A", parent=2)),
            "/wp-json/wp/v2/pages/2": make_response(make_page(2, "B", parent=1)),
        })

        with pytest.raises(ValidationError):
            source.get_ancestors(1)


class TestStaff:
    def test_staff_custom_fields(self, source):
        routes(source, {
            "/wp-json/wp/v2/staff": make_response([
                {"id": 100, "menu_order": 2, "acf": {"full_name": "Jane Organ", "position": "Organist"}},
                {"id": 101, "menu_order": 1, "acf": {"full_name": "John Rector", "image": f"{SITE}/rector.jpg"}},
                {"id": 102, "menu_order": 3, "acf": False},
            ]),
            "/wp-json/wp/v2/staff/100": make_response({"id": 100, "acf": {"full_name": "Jane Organ"}}),
        })

        staff = source.get_staff()

        assert [s.id for s in staff] == [101, 100, 102]
        assert staff[0].image.url == f"{SITE}/rector.jpg"
        assert staff[2].full_name == ""
        assert source.get_custom_fields(100) == {"full_name": "Jane Organ"}

    def test_missing_staff_record(self, source):
        routes(source, {"/wp-json/wp/v2/staff/5": make_response({}, 404)})

        with pytest.raises(ContentNotFoundError):
            source.get_custom_fields(5)


class TestMenu:
    def test_menu_tree_from_top_bar_location(self, source):
        items = [
            {"id": 31, "title": {"rendered": "Youth"}, "url": f"{SITE}/youth/", "parent": 30, "menu_order": 3},
            {"id": 32, "title": {"rendered": "Give"}, "url": f"{SITE}/give/", "parent": 0, "menu_order": 4},
            {"id": 30, "title": {"rendered": "About"}, "url": f"{SITE}/about/", "parent": 0, "menu_order": 1},
            {"id": 33, "title": {"rendered": "Staff"}, "url": f"{SITE}/staff/", "parent": 30, "menu_order": 2},
        ]
        routes(source, {
            "/wp-json/wp/v2/menu-locations/top-bar-r": make_response({"name": "top-bar-r", "menu": 5}),
            "/wp-json/wp/v2/menu-items": make_response(items),
        })

        menu = source.get_menu()

        assert [item.title for item in menu] == ["About", "Give"]
        assert [child.title for child in menu[0].children] == ["Staff", "Youth"]
        assert menu[1].children == []
        assert source.session.request.call_args_list[1].kwargs["params"]["menus"] == 5

    def test_unassigned_location(self, source):
        routes(source, {"/wp-json/wp/v2/menu-locations/top-bar-r": make_response({"name": "top-bar-r", "menu": 0})})

        assert source.get_menu() == []
        assert source.session.request.call_count == 1

    def test_site_without_menu_endpoints(self, source):
        routes(source, {
            "/wp-json/wp/v2/menu-locations/top-bar-r": make_response({"code": "rest_no_route"}, 404),
        })

        assert source.get_menu() == []

    def test_unauthorized_menu_is_an_error(self, source):
        routes(source, {
            "/wp-json/wp/v2/menu-locations/top-bar-r": make_response({"message": "Sorry, you are not allowed."}, 401),
        })

        with pytest.raises(UnauthorizedError):
            source.get_menu()


class TestErrorHandling:
    def test_unauthorized(self, source):
        source.session.request.return_value = make_response({"message": "Sorry, you are not allowed."}, 401)

        with pytest.raises(UnauthorizedError) as exc_info:
            source.get_staff()

        assert "not allowed" in str(exc_info.value)

    def test_rate_limit_carries_retry_after(self, source):
        source.session.request.return_value = make_response({}, 429, headers={"Retry-After": "12"})

        with pytest.raises(MaxRetriesExceededError) as exc_info:
            source.get_staff()

        assert isinstance(exc_info.value.last_exception, RateLimitError)
        assert exc_info.value.last_exception.retry_after == 12

    def test_server_error_is_retried(self, source):
        sleep = Mock()
        source.retry_manager = RetryManager(max_retries=1, jitter=False, sleep=sleep)
        source.session.request.side_effect = [make_response({}, 503), make_response([])]

        assert source.get_staff() == []
        assert source.session.request.call_count == 2
        sleep.assert_called_once_with(1.0)

