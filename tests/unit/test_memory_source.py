"""Unit tests for the file-backed content source."""

import json

import pytest
import yaml

from shepherdpress.exceptions import ConfigError, ContentNotFoundError, ValidationError
from shepherdpress.ports import RECENT_NEWS_CATEGORY, ContentSource
from shepherdpress.sources import MemoryContentSource

CONTENT = {
    "posts": [
        {"id": 1, "title": "Old", "slug": "old", "published_at": "2016-08-01T09:00:00", "categories": ["recent-news"]},
        {"id": 2, "title": "New", "slug": "new", "published_at": "2016-09-05T09:00:00", "categories": ["recent-news"]},
        {"id": 3, "title": "Mid", "slug": "mid", "published_at": "2016-08-20T09:00:00", "categories": ["recent-news"]},
        {"id": 4, "title": "Other", "slug": "other", "published_at": "2016-09-10T09:00:00", "categories": ["sermons"]},
    ],
    "pages": [
        {"id": 10, "title": "About", "slug": "about", "link": "/about/", "parent": 0},
        {"id": 11, "title": "Ministries", "slug": "ministries", "link": "/about/ministries/", "parent": 10},
        {"id": 12, "title": "Youth", "slug": "youth", "link": "/about/ministries/youth/", "parent": 11},
    ],
    "staff": [
        {"id": 100, "menu_order": 2, "fields": {"full_name": "Organist"}},
        {"id": 101, "menu_order": 1, "fields": {"full_name": "Rector", "image": {"url": "/rector.jpg"}}},
    ],
    "menu": [
        {"title": "About", "url": "/about/", "children": [{"title": "Staff", "url": "/staff/"}]},
    ],
}


class TestMemoryContentSource:
    """Test cases for MemoryContentSource."""

    @pytest.fixture
    def source(self):
        return MemoryContentSource.from_dict(CONTENT)

    def test_implements_port(self, source):
        assert isinstance(source, ContentSource)

    def test_posts_newest_first(self, source):
        posts = source.get_posts_by_category(RECENT_NEWS_CATEGORY, 3)

        assert [p.id for p in posts] == [2, 3, 1]

    def test_posts_limited(self, source):
        assert [p.id for p in source.get_posts_by_category(RECENT_NEWS_CATEGORY, 2)] == [2, 3]

    def test_posts_with_mixed_date_styles(self):
        source = MemoryContentSource.from_dict({"posts": [
            {"id": 1, "title": "Noon UTC", "slug": "noon", "published_at": "2016-09-05T12:00:00Z",
             "categories": ["recent-news"]},
            {"id": 2, "title": "Eleven local", "slug": "eleven", "published_at": "2016-09-05T11:00:00",
             "categories": ["recent-news"]},
            {"id": 3, "title": "Half past ten", "slug": "half-ten", "published_at": "2016-09-05T12:30:00+02:00",
             "categories": ["recent-news"]},
        ]})

        assert [p.id for p in source.get_posts_by_category(RECENT_NEWS_CATEGORY, 3)] == [1, 2, 3]

    def test_posts_fewer_than_limit(self, source):
        assert len(source.get_posts_by_category("sermons", 3)) == 1

    def test_unknown_category_is_empty(self, source):
        assert source.get_posts_by_category("missing", 3) == []

    def test_get_page(self, source):
        assert source.get_page(12).title == "Youth"

    def test_get_missing_page_raises(self, source):
        with pytest.raises(ContentNotFoundError):
            source.get_page(999)

    def test_ancestors_nearest_first(self, source):
        ancestors = source.get_ancestors(12)

        assert [a.title for a in ancestors] == ["Ministries", "About"]
        assert source.get_ancestors(10) == []

    def test_ancestor_cycle_raises(self):
        source = MemoryContentSource.from_dict({
            "pages": [
                {"id": 1, "title": "A", "slug": "a", "parent": 2},
                {"id": 2, "title": "B", "slug": "b", "parent": 1},
            ]
        })

        with pytest.raises(ValidationError):
            source.get_ancestors(1)

    def test_staff_in_menu_order(self, source):
        staff = source.get_staff()

        assert [s.full_name for s in staff] == ["Rector", "Organist"]
        assert staff[0].image.url == "/rector.jpg"

    def test_custom_fields(self, source):
        assert source.get_custom_fields(100) == {"full_name": "Organist"}

        with pytest.raises(ContentNotFoundError):
            source.get_custom_fields(1)

    def test_menu(self, source):
        menu = source.get_menu()

        assert menu[0].title == "About"
        assert menu[0].children[0].url == "/staff/"

    def test_menu_is_a_copy(self, source):
        source.get_menu().clear()

        assert len(source.get_menu()) == 1

    def test_invalid_record_raises(self):
        with pytest.raises(ValidationError):
            MemoryContentSource.from_dict({"posts": [{"id": 1}]})

    def test_staff_without_id_raises(self):
        with pytest.raises(ValidationError):
            MemoryContentSource.from_dict({"staff": [{"fields": {}}]})


class TestMemoryContentSourceFiles:
    """Test cases for loading content files."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "content.yaml"
        path.write_text(yaml.safe_dump(CONTENT))

        source = MemoryContentSource.from_file(path)

        assert source.get_page(10).title == "About"

    def test_from_json(self, tmp_path):
        path = tmp_path / "content.json"
        path.write_text(json.dumps(CONTENT))

        source = MemoryContentSource.from_file(path)

        assert len(source.get_staff()) == 2

    def test_empty_file(self, tmp_path):
        path = tmp_path / "content.yaml"
        path.write_text("")

        assert MemoryContentSource.from_file(path).get_staff() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            MemoryContentSource.from_file(tmp_path / "missing.yaml")

    def test_broken_json(self, tmp_path):
        path = tmp_path / "content.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError):
            MemoryContentSource.from_file(path)
