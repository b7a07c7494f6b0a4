"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from logscrub.config.settings.base import Settings
from logscrub.config.validation import InvalidSettingValueError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class SettingsLoader(abc.ABC):
    """Port: read raw setting values from an external source."""

    @abc.abstractmethod
    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        """Return field values found in the source; absent fields are omitted."""


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` environment variables.

    Redaction settings are strings, booleans and comma-separated name lists;
    those are the only coercions performed.  An unrecognised boolean raises
    instead of silently turning an option off.
    """

    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        prefix = settings_class._prefix.upper()
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            if raw is not None:
                values[field.name] = self._coerce(env_key, raw, field.type)
        return values

    def _coerce(self, env_key: str, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            flag = value.strip().lower()
            if flag not in _TRUE | _FALSE:
                raise InvalidSettingValueError(env_key, value, "expected a boolean flag")
            return flag in _TRUE
        if getattr(type_hint, "__origin__", None) is list or str(type_hint).startswith("list"):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like
    :class:`EnvSettingsLoader`.  Variables already set in the process win."""

    def __init__(self, env_file: str = ".env") -> None:
        self._env_file = env_file

    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        try:
            from dotenv import load_dotenv
        except ImportError as exc:
            raise ImportError("Install 'logscrub[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=False)
        return super().read(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
