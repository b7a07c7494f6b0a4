"""Config settings – SettingsFactory and load_settings."""
from __future__ import annotations

from typing import Any, Sequence, TypeVar

from logscrub.config.settings.base import ScrubberSettings, Settings
from logscrub.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
)
from logscrub.config.validation.errors import ConfigError

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Merge loader outputs and overrides into one settings instance.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* take the highest priority.  Loader
    errors propagate: redaction must not start on half-read settings.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        InvalidSettingValueError
            When a loader or the settings validation rejects a value.
        ConfigError
            When the merged values do not fit *settings_cls* (e.g. an
            unknown field name).
        """
        merged: dict[str, Any] = {}
        for loader in loaders or []:
            merged.update(loader.read(settings_cls))
        if overrides:
            merged.update(overrides)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(
                f"Cannot build {settings_cls.__name__}: {exc}",
                detail={"fields": sorted(merged)},
                cause=exc,
            ) from exc


def load_settings(env_file: str | None = None, **overrides: Any) -> ScrubberSettings:
    """Build :class:`ScrubberSettings` from the environment (and *env_file*)."""
    loader: SettingsLoader = (
        DotenvSettingsLoader(env_file) if env_file is not None else EnvSettingsLoader()
    )
    return SettingsFactory.create(ScrubberSettings, [loader], overrides or None)


__all__ = ["SettingsFactory", "load_settings"]
