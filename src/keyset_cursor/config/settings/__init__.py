"""Config settings – 12-factor env-based configuration."""
from keyset_cursor.config.settings.base import Settings
from keyset_cursor.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from keyset_cursor.config.settings.pagination import PaginationSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PaginationSettings",
    "Settings",
    "SettingsLoader",
]
