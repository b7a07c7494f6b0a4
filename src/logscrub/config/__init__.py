"""Config – 12-factor settings and loaders."""

from logscrub.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ScrubberSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    load_settings,
)
from logscrub.config.validation import (
    ConfigError,
    InvalidSettingValueError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "ScrubberSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
