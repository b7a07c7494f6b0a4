"""Config settings – 12-factor env-based configuration."""
from logscrub.config.settings.base import ScrubberSettings, Settings
from logscrub.config.settings.factory import SettingsFactory, load_settings
from logscrub.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ScrubberSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
