"""Configuration management for ShepherdPress.

This module provides site profile management (creating, updating, deleting
and switching between sites) and the YAML-backed store that holds the
customizer setting values a render reads.
"""

import os
import tomllib
import json
from pathlib import Path
from typing import Dict, List, Optional, Any, Union
from urllib.parse import urlparse
import re

from pydantic import BaseModel, Field, field_validator, model_validator, HttpUrl
from rich.console import Console
import requests
import yaml

from .customizer import CustomizerRegistry
from .exceptions import ConfigError

ENV_SITE_URL = "SHEPHERDPRESS_SITE_URL"
ENV_USERNAME = "SHEPHERDPRESS_USERNAME"
ENV_APP_PASSWORD = "SHEPHERDPRESS_APP_PASSWORD"

console = Console(stderr=True)


class Profile(BaseModel):
    """Configuration profile for one church site."""

    name: str = Field(..., description="Profile name")
    url: Optional[HttpUrl] = Field(None, description="WordPress site URL for REST content")
    username: Optional[str] = Field(None, description="WordPress user for application-password auth")
    app_password: Optional[str] = Field(None, description="WordPress application password")
    site_name: str = Field(default="Church of the Good Shepherd", description="Site title shown in the header")
    home_url: str = Field(default="/", description="Link target of the site title")
    language: str = Field(default="en-US", description="Document language attribute")
    charset: str = Field(default="UTF-8", description="Document charset")
    assets_url: str = Field(default="/wp-content/themes/goodshepherd", description="Base URL of theme assets")
    settings_file: Optional[str] = Field(None, description="YAML file with stored setting values")
    content_file: Optional[str] = Field(None, description="YAML/JSON file with offline content")
    timeout: int = Field(default=30, description="Request timeout in seconds")
    retry_attempts: int = Field(default=3, description="Number of retry attempts")
    active: bool = Field(default=False, description="Whether this is the active profile")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Profile names become file names."""
        if not re.match(r"^[A-Za-z0-9_-]+$", v):
            raise ValueError("Profile name may only contain letters, digits, dashes and underscores")
        return v

    @field_validator("app_password")
    @classmethod
    def validate_app_password(cls, v: Optional[str]) -> Optional[str]:
        """Validate application password format.

        WordPress shows application passwords as six space-separated groups
        of four characters; the spaces are optional.
        """
        if v is None:
            return v

        compact = v.replace(" ", "")
        if not re.match(r"^[A-Za-z0-9]{24}$", compact):
            raise ValueError("Invalid application password format. Expected 24 letters or digits")

        return compact

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Timeout must be greater than 0")
        if v > 300:
            raise ValueError("Timeout cannot exceed 300 seconds")
        return v

    @field_validator("retry_attempts")
    @classmethod
    def validate_retry_attempts(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Retry attempts cannot be negative")
        if v > 10:
            raise ValueError("Retry attempts cannot exceed 10")
        return v

    @model_validator(mode="after")
    def validate_credentials(self) -> "Profile":
        """Username and application password go together."""
        if bool(self.username) != bool(self.app_password):
            raise ValueError("username and app_password must be provided together")
        return self

    def model_dump(self, **kwargs: Any) -> Dict[str, Any]:
        """Dump with the URL as a plain string without trailing slash."""
        data = super().model_dump(**kwargs)
        if data.get("url") is not None:
            data["url"] = str(data["url"]).rstrip("/")
        return data

    def has_credentials(self) -> bool:
        return bool(self.username and self.app_password)


class ConfigManager:
    """Manages configuration profiles for church sites."""

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Open (and create) the configuration directory.

        Args:
            config_dir: Where profiles live; ``~/.shepherdpress`` when omitted
        """
        self.config_dir = config_dir or Path.home() / ".shepherdpress"
        self.config_file = self.config_dir / "config.toml"
        self.profiles_dir = self.config_dir / "profiles"

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.profiles_dir.mkdir(exist_ok=True)

        self._profiles: Dict[str, Profile] = {}
        self._active_profile: Optional[str] = None
        self._load_config()

    def create_profile(
        self,
        name: str,
        url: Optional[str] = None,
        username: Optional[str] = None,
        app_password: Optional[str] = None,
        validate_connection: bool = False,
        **options: Any,
    ) -> Profile:
        """Create and save a site profile.

        Args:
            name: Profile name
            url: WordPress site URL (optional for offline profiles)
            username: WordPress user name
            app_password: WordPress application password
            validate_connection: Probe the site's REST root before saving
            **options: Remaining Profile fields (site_name, settings_file, ...)

        Returns:
            Created profile

        Raises:
            ConfigError: If the name is taken or a field is invalid
        """
        if name in self._profiles:
            raise ConfigError(f"Profile '{name}' already exists")

        try:
            if url is not None:
                parsed_url = urlparse(url)
                if not parsed_url.scheme or not parsed_url.netloc:
                    raise ConfigError("Invalid URL format")

            profile = Profile(
                name=name,
                url=url,
                username=username,
                app_password=app_password,
                **options,
            )

            if validate_connection:
                self._validate_connection(profile)

            self._profiles[name] = profile
            self._save_profile(profile)
            self._save_config()

            return profile

        except Exception as e:
            if isinstance(e, ConfigError):
                raise
            raise ConfigError(f"Failed to create profile: {e}")

    def list_profiles(self) -> List[Dict[str, Any]]:
        profiles = []
        for profile in self._profiles.values():
            profile_dict = profile.model_dump(exclude={"app_password"})
            profile_dict["active"] = profile.name == self._active_profile
            profiles.append(profile_dict)

        return profiles

    def set_active_profile(self, name: str) -> None:
        """Set the active profile.

        Raises:
            ConfigError: If profile doesn't exist
        """
        if name not in self._profiles:
            raise ConfigError(f"Profile '{name}' not found")

        for profile in self._profiles.values():
            profile.active = profile.name == name

        self._active_profile = name
        self._save_config()

    def get_active_profile(self) -> Optional[str]:
        return self._active_profile

    def get_default_profile(self) -> Profile:
        """Profile selected with ``config use``.

        Raises:
            ConfigError: If no profile is active
        """
        if not self._active_profile:
            raise ConfigError("No active profile set")

        return self._profiles[self._active_profile]

    def get_profile(self, name: str) -> Profile:
        """Raises ConfigError for unknown names."""
        if name not in self._profiles:
            raise ConfigError(f"Profile '{name}' not found")

        return self._profiles[name]

    def delete_profile(self, name: str) -> None:
        """Remove a profile and its file; deleting the active one leaves none active.

        Raises:
            ConfigError: If the profile does not exist
        """
        if name not in self._profiles:
            raise ConfigError(f"Profile '{name}' not found")

        if self._active_profile == name:
            self._active_profile = None

        del self._profiles[name]

        profile_file = self.profiles_dir / f"{name}.json"
        if profile_file.exists():
            profile_file.unlink()

        self._save_config()

    def has_environment_config(self) -> bool:
        return bool(os.getenv(ENV_SITE_URL))

    def get_environment_config(self) -> Dict[str, Any]:
        """Profile fields taken from ``SHEPHERDPRESS_*`` variables.

        Raises:
            ConfigError: If the site URL variable is missing
        """
        env_url = os.getenv(ENV_SITE_URL)
        if not env_url:
            raise ConfigError(f"{ENV_SITE_URL} environment variable is required")

        return {
            "name": "environment",
            "url": env_url,
            "username": os.getenv(ENV_USERNAME),
            "app_password": os.getenv(ENV_APP_PASSWORD),
            "active": True,
        }

    def _validate_connection(self, profile: Profile) -> None:
        """Check the site answers on its REST API root.

        Raises:
            ConfigError: If the site is unreachable or does not answer 200
        """
        if profile.url is None:
            raise ConfigError("Cannot validate a profile without a URL")

        try:
            url = f"{str(profile.url).rstrip('/')}/wp-json/"
            response = requests.get(url, timeout=profile.timeout)

            if response.status_code != 200:
                raise ConfigError(f"Failed to connect to site: HTTP {response.status_code}")

        except requests.exceptions.RequestException as e:
            raise ConfigError(f"Failed to connect to site: {e}")

    def _load_config(self) -> None:
        """Read the active profile name and every profile file."""
        if not self.config_file.exists():
            return

        try:
            with open(self.config_file, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load configuration: {e}")

        self._active_profile = config_data.get("active_profile")

        for profile_file in self.profiles_dir.glob("*.json"):
            try:
                with open(profile_file, "r") as f:
                    profile_data = json.load(f)

                profile = Profile(**profile_data)
                self._profiles[profile.name] = profile
            except Exception as e:
                # Skip broken profile files, keep loading the rest
                console.print(f"[yellow]Warning: Failed to load profile {profile_file}: {e}[/yellow]")

        if self._active_profile not in self._profiles:
            self._active_profile = None

    def _save_config(self) -> None:
        # tomllib is read-only, so the file is written by hand
        lines = ["# ShepherdPress configuration", 'version = "1.0"']
        if self._active_profile:
            lines.append(f'active_profile = "{self._active_profile}"')

        try:
            with open(self.config_file, "w") as f:
                f.write("\n".join(lines) + "\n")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}")

    def _save_profile(self, profile: Profile) -> None:
        try:
            profile_file = self.profiles_dir / f"{profile.name}.json"
            with open(profile_file, "w") as f:
                json.dump(profile.model_dump(), f, indent=2, default=str)
        except OSError as e:
            raise ConfigError(f"Failed to save profile: {e}")


class SettingsStore:
    """YAML file holding the stored values of customizer settings.

    Only keys that were explicitly set appear in the file. A key stored as
    the empty string stays set; removing it with ``unset`` restores the
    registered default.
    """

    def __init__(self, file_path: Union[str, Path], registry: CustomizerRegistry) -> None:
        self.file_path = Path(file_path)
        self.registry = registry
        self._values: Dict[str, Optional[str]] = self._load()

    def _load(self) -> Dict[str, Optional[str]]:
        if not self.file_path.exists():
            return {}

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load settings file {self.file_path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {self.file_path} must contain a mapping")

        return {str(k): (None if v is None else str(v)) for k, v in data.items()}

    def _save(self) -> None:
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(self._values, f, default_flow_style=False, allow_unicode=True, sort_keys=True)
        except OSError as e:
            raise ConfigError(f"Failed to save settings file {self.file_path}: {e}")

    def get(self, key: str) -> Optional[str]:
        """Stored value of a key, ``None`` when unset."""
        self.registry.get_setting(key)
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = self.registry.validate_value(key, value)
        self._save()

    def unset(self, key: str) -> bool:
        """Remove a stored value. Returns whether anything was removed."""
        self.registry.get_setting(key)
        if key not in self._values:
            return False
        del self._values[key]
        self._save()
        return True

    def as_mapping(self) -> Dict[str, Optional[str]]:
        return dict(self._values)
