"""Observability – structured logging helpers."""
from logscrub.observability.logging.factory import JsonLoggerFactory
from logscrub.observability.logging.filters import ParameterLogFilter
from logscrub.observability.logging.processors import ParameterFilterProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "ParameterFilterProcessor",
    "ParameterLogFilter",
    "get_logger",
]
