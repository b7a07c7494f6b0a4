"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

import structlog

if TYPE_CHECKING:
    from logscrub.params import ParameterFilter

_DEFAULT_SKIP_KEYS = (
    "event", "level", "logger", "timestamp", "exc_info", "stack_info", "stack",
)


class ParameterFilterProcessor:
    """structlog processor that runs a :class:`ParameterFilter` over events.

    Every key of the event dict except *skip_keys* is filtered, so a
    ``params=`` or ``query=`` keyword reaches the renderer already scrubbed.
    Pass *keys* to filter only those event keys instead; useful when other
    code logs an unrelated ``query=`` field (e.g. SQL) that would otherwise
    be parsed as GraphQL.

    Usage::

        import structlog
        from logscrub.params import build_parameter_filter
        from logscrub.observability.logging import ParameterFilterProcessor

        structlog.configure(processors=[
            ParameterFilterProcessor(build_parameter_filter()),
            structlog.processors.JSONRenderer(),
        ])
    """

    def __init__(
        self,
        parameter_filter: "ParameterFilter",
        skip_keys: Iterable[str] = _DEFAULT_SKIP_KEYS,
        keys: Iterable[str] | None = None,
    ) -> None:
        self._filter = parameter_filter
        self._skip = frozenset(skip_keys)
        self._keys = frozenset(keys) if keys is not None else None

    def _wants(self, key: str) -> bool:
        if key in self._skip:
            return False
        return self._keys is None or key in self._keys

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return {
            key: self._filter.filter_param(key, value) if self._wants(key) else value
            for key, value in event_dict.items()
        }


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ParameterFilterProcessor", "get_logger"]
