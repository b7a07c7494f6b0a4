"""Config validation – checks shared by settings and ScrubConfig."""
from __future__ import annotations

from typing import Any

from graphql import GraphQLSyntaxError, parse_value

from logscrub.config.validation.errors import InvalidSettingValueError


def check_placeholder(setting_name: str, value: Any) -> None:
    """Reject placeholders the printer cannot emit as a GraphQL value.

    The placeholder is printed verbatim in argument position; anything that
    does not parse as a value (``***``, ``<hidden>``) would turn scrubbed
    queries into invalid documents that fail a second scrubbing pass.
    """
    if not isinstance(value, str) or not value:
        raise InvalidSettingValueError(setting_name, value, "must be a non-empty string")
    try:
        parse_value(value)
    except GraphQLSyntaxError as exc:
        raise InvalidSettingValueError(
            setting_name, value, "must be a GraphQL value literal such as [FILTERED]"
        ) from exc


def check_names(setting_name: str, value: Any) -> None:
    """Reject a bare string where a collection of names is expected."""
    if isinstance(value, (str, bytes)):
        raise InvalidSettingValueError(
            setting_name, value, "expected a collection of names, not a single string"
        )
    for name in value:
        if not isinstance(name, str) or not name:
            raise InvalidSettingValueError(setting_name, name, "names must be non-empty strings")


__all__ = ["check_names", "check_placeholder"]
