"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

import structlog

from logscrub.observability.logging.processors import ParameterFilterProcessor

if TYPE_CHECKING:
    from logscrub.params import ParameterFilter


class JsonLoggerFactory:
    """Configure structlog for JSON output through the stdlib root logger."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        parameter_filter: "ParameterFilter | None" = None,
        filter_keys: Iterable[str] | None = None,
    ) -> None:
        """Install a JSON root handler.

        The parameter filter runs after context variables are merged, so
        values bound with ``bind_contextvars`` are filtered too.
        """
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if parameter_filter is not None:
            shared_processors.append(ParameterFilterProcessor(parameter_filter, keys=filter_keys))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
