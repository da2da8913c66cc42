"""ShepherdPress package.

The Good Shepherd church theme as a set of pure renderers: settings-driven
header, footer and front page, a full-width page template and a staff
directory, fed by injected settings and content sources.
"""

__version__ = "0.1.0"
__description__ = "Church website theme renderers and CLI"

# Re-export main classes for convenience
from .config import ConfigManager, Profile, SettingsStore
from .content_types import ContentTypeRegistry, build_content_types
from .customizer import CustomizerRegistry, build_registry
from .hooks import HookRegistry
from .ports import ContentSource
from .render import OutputFormatter
from .shortcodes import ShortcodeRegistry
from .sources import MemoryContentSource, WordPressContentSource, open_content_source
from .utils.retry import RetryManager
from .exceptions import (
    ShepherdPressError,
    ConfigError,
    ValidationError,
    RegistrationError,
    SettingNotRegisteredError,
    ContentNotFoundError,
    MaxRetriesExceededError,
    APIError,
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    RateLimitError,
)

__all__ = [
    "__version__",
    "__description__",
    "ConfigManager",
    "Profile",
    "SettingsStore",
    "ContentTypeRegistry",
    "build_content_types",
    "CustomizerRegistry",
    "build_registry",
    "HookRegistry",
    "ContentSource",
    "OutputFormatter",
    "ShortcodeRegistry",
    "MemoryContentSource",
    "WordPressContentSource",
    "open_content_source",
    "RetryManager",
    "ShepherdPressError",
    "ConfigError",
    "ValidationError",
    "RegistrationError",
    "SettingNotRegisteredError",
    "ContentNotFoundError",
    "MaxRetriesExceededError",
    "APIError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ServerError",
    "RateLimitError",
]
