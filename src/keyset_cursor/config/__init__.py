"""Config – 12-factor settings and loaders."""

from keyset_cursor.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    PaginationSettings,
    Settings,
    SettingsLoader,
)
from keyset_cursor.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PaginationSettings",
    "Settings",
    "SettingsLoader",
]
