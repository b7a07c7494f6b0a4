"""Observability – ParameterLogFilter for stdlib logging."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logscrub.params import ParameterFilter

__all__ = ["ParameterLogFilter"]


class ParameterLogFilter(logging.Filter):
    """Applies a ParameterFilter to dict log record msg and args before emission."""

    def __init__(self, parameter_filter: "ParameterFilter", name: str = "") -> None:
        super().__init__(name)
        self._filter = parameter_filter

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if isinstance(record.msg, dict):
            record.msg = self._filter.filter(record.msg)
        if isinstance(record.args, dict):
            record.args = self._filter.filter(record.args)  # type: ignore[assignment]
        elif isinstance(record.args, (list, tuple)):
            filtered: list[Any] = []
            for arg in record.args:
                if isinstance(arg, dict):
                    filtered.append(self._filter.filter(arg))
                else:
                    filtered.append(arg)
            record.args = tuple(filtered)
        return True
