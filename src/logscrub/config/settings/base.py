"""Config settings – Settings base class and ScrubberSettings."""
# No ``from __future__ import annotations`` here: EnvSettingsLoader coerces
# environment strings by the real field types.

import dataclasses
from typing import TYPE_CHECKING, ClassVar

from logscrub.config.validation import InvalidSettingValueError, check_names, check_placeholder
from logscrub.kernel.security import (
    DEFAULT_FILTER_PARAMETERS,
    DEFAULT_FILTERED_ARGS,
    DEFAULT_QUERY_PARAMS,
    FILTERED_VALUE,
)

if TYPE_CHECKING:
    from logscrub.query.config import ScrubConfig

PARSE_ERROR_MODES = ("keep", "filter")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ScrubberSettings(Settings):
    """Redaction settings, read once at process start.

    Environment variables use the ``LOGSCRUB_`` prefix, e.g.
    ``LOGSCRUB_FILTERED_ARGS=password,token``.
    """

    _prefix: ClassVar[str] = "LOGSCRUB"

    filtered_args: list[str] = dataclasses.field(
        default_factory=lambda: sorted(DEFAULT_FILTERED_ARGS)
    )
    filtered_value: str = FILTERED_VALUE
    filter_parameters: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_FILTER_PARAMETERS)
    )
    query_params: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_QUERY_PARAMS)
    )
    redact_object_fields: bool = False
    on_parse_error: str = "keep"

    def _validate(self) -> None:
        check_placeholder("filtered_value", self.filtered_value)
        for name in ("filtered_args", "filter_parameters", "query_params"):
            check_names(name, getattr(self, name))
        if self.on_parse_error not in PARSE_ERROR_MODES:
            raise InvalidSettingValueError(
                "on_parse_error",
                self.on_parse_error,
                f"expected one of {', '.join(PARSE_ERROR_MODES)}",
            )

    def to_scrub_config(self) -> "ScrubConfig":
        from logscrub.query.config import ScrubConfig

        return ScrubConfig(
            filtered_args=self.filtered_args,
            filtered_value=self.filtered_value,
            redact_object_fields=self.redact_object_fields,
        )


__all__ = ["PARSE_ERROR_MODES", "ScrubberSettings", "Settings"]
