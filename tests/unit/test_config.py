"""Unit tests for config.py module.

Tests the Profile and ConfigManager classes for configuration management
including validation, file operations, profile switching, and environment handling.
"""

import json
import pytest
from unittest.mock import Mock, patch

from pydantic import ValidationError
import requests

from shepherdpress.config import (
    ENV_APP_PASSWORD,
    ENV_SITE_URL,
    ENV_USERNAME,
    ConfigManager,
    Profile,
)
from shepherdpress.exceptions import ConfigError

APP_PASSWORD = "abcd EFGH 1234 ijkl MNOP 5678"


class TestProfile:
    """Test cases for the Profile model."""

    def test_profile_creation_with_valid_data(self):
        """Test creating a profile with valid data."""
        profile = Profile(
            name="live",
            url="https://goodshepherd.example.org",
            username="editor",
            app_password=APP_PASSWORD,
            site_name="Good Shepherd",
            timeout=10,
        )

        assert profile.name == "live"
        assert str(profile.url).rstrip("/") == "https://goodshepherd.example.org"
        assert profile.app_password == "abcdEFGH1234ijklMNOP5678"
        assert profile.site_name == "Good Shepherd"
        assert profile.has_credentials()
        assert profile.active is False

    def test_profile_creation_minimal_data(self):
        """Test an offline profile needs only a name."""
        profile = Profile(name="local")

        assert profile.url is None
        assert profile.site_name == "Church of the Good Shepherd"
        assert profile.language == "en-US"
        assert profile.timeout == 30
        assert profile.retry_attempts == 3
        assert not profile.has_credentials()

    @pytest.mark.parametrize("password", ["short", "abcd-EFGH-1234-ijkl-MNOP-5678", "x" * 25])
    def test_invalid_app_password(self, password):
        with pytest.raises(ValidationError):
            Profile(name="live", username="editor", app_password=password)

    def test_username_requires_password(self):
        with pytest.raises(ValidationError):
            Profile(name="live", username="editor")

    @pytest.mark.parametrize("name", ["has space", "semi;colon", ""])
    def test_invalid_name(self, name):
        with pytest.raises(ValidationError):
            Profile(name=name)

    @pytest.mark.parametrize("timeout", [0, 301])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ValidationError):
            Profile(name="live", timeout=timeout)

    def test_invalid_retry_attempts(self):
        with pytest.raises(ValidationError):
            Profile(name="live", retry_attempts=11)

    def test_model_dump_strips_trailing_slash(self):
        profile = Profile(name="live", url="https://goodshepherd.example.org/")

        assert profile.model_dump()["url"] == "https://goodshepherd.example.org"


class TestConfigManager:
    """Test cases for the ConfigManager class."""

    @pytest.fixture
    def config_dir(self, tmp_path):
        return tmp_path / ".shepherdpress"

    @pytest.fixture
    def manager(self, config_dir):
        return ConfigManager(config_dir=config_dir)

    def test_creates_directories(self, manager, config_dir):
        assert config_dir.is_dir()
        assert (config_dir / "profiles").is_dir()

    def test_create_and_get_profile(self, manager, config_dir):
        manager.create_profile("local", content_file="content.yaml", site_name="Good Shepherd")

        profile = manager.get_profile("local")
        assert profile.content_file == "content.yaml"
        assert profile.site_name == "Good Shepherd"

        with open(config_dir / "profiles" / "local.json") as f:
            assert json.load(f)["content_file"] == "content.yaml"

    def test_create_duplicate_profile_raises(self, manager):
        manager.create_profile("local")

        with pytest.raises(ConfigError):
            manager.create_profile("local")

    def test_create_profile_with_invalid_url(self, manager):
        with pytest.raises(ConfigError):
            manager.create_profile("live", url="not-a-url")

    def test_create_profile_with_invalid_field(self, manager):
        with pytest.raises(ConfigError):
            manager.create_profile("live", username="editor")

    def test_active_profile_persists(self, manager, config_dir):
        manager.create_profile("local")
        manager.create_profile("live", url="https://goodshepherd.example.org")
        manager.set_active_profile("live")

        reloaded = ConfigManager(config_dir=config_dir)

        assert reloaded.get_active_profile() == "live"
        assert reloaded.get_default_profile().name == "live"

    def test_set_unknown_active_profile_raises(self, manager):
        with pytest.raises(ConfigError):
            manager.set_active_profile("missing")

    def test_no_default_profile_raises(self, manager):
        with pytest.raises(ConfigError):
            manager.get_default_profile()

    def test_list_profiles_hides_password(self, manager):
        manager.create_profile(
            "live", url="https://goodshepherd.example.org", username="editor", app_password=APP_PASSWORD
        )
        manager.set_active_profile("live")

        profiles = manager.list_profiles()

        assert profiles[0]["name"] == "live"
        assert profiles[0]["active"] is True
        assert "app_password" not in profiles[0]

    def test_delete_profile(self, manager, config_dir):
        manager.create_profile("local")
        manager.set_active_profile("local")

        manager.delete_profile("local")

        assert manager.get_active_profile() is None
        assert not (config_dir / "profiles" / "local.json").exists()
        with pytest.raises(ConfigError):
            manager.get_profile("local")

    def test_broken_profile_file_is_skipped(self, manager, config_dir):
        manager.create_profile("local")
        (config_dir / "profiles" / "broken.json").write_text("{not json")

        reloaded = ConfigManager(config_dir=config_dir)

        assert [p["name"] for p in reloaded.list_profiles()] == ["local"]

    def test_environment_config(self, manager, monkeypatch):
        monkeypatch.setenv(ENV_SITE_URL, "https://env.example.org")
        monkeypatch.setenv(ENV_USERNAME, "editor")
        monkeypatch.setenv(ENV_APP_PASSWORD, APP_PASSWORD)

        assert manager.has_environment_config()
        env = manager.get_environment_config()

        assert env["url"] == "https://env.example.org"
        assert env["username"] == "editor"
        assert Profile(**env).has_credentials()

    def test_environment_config_missing(self, manager, monkeypatch):
        monkeypatch.delenv(ENV_SITE_URL, raising=False)

        assert not manager.has_environment_config()
        with pytest.raises(ConfigError):
            manager.get_environment_config()

    @patch("shepherdpress.config.requests.get")
    def test_validate_connection_success(self, mock_get, manager):
        mock_get.return_value = Mock(status_code=200)

        manager.create_profile("live", url="https://goodshepherd.example.org", validate_connection=True)

        mock_get.assert_called_once_with("https://goodshepherd.example.org/wp-json/", timeout=30)

    @patch("shepherdpress.config.requests.get")
    def test_validate_connection_http_error(self, mock_get, manager):
        mock_get.return_value = Mock(status_code=500)

        with pytest.raises(ConfigError):
            manager.create_profile("live", url="https://goodshepherd.example.org", validate_connection=True)

        with pytest.raises(ConfigError):
            manager.get_profile("live")

    @patch("shepherdpress.config.requests.get")
    def test_validate_connection_network_error(self, mock_get, manager):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ConfigError):
            manager.create_profile("live", url="https://goodshepherd.example.org", validate_connection=True)
