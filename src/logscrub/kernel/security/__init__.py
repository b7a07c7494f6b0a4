"""Kernel security – redaction defaults."""
from logscrub.kernel.security.defaults import (
    DEFAULT_FILTER_PARAMETERS,
    DEFAULT_FILTERED_ARGS,
    DEFAULT_QUERY_PARAMS,
    FILTERED_VALUE,
)

__all__ = [
    "DEFAULT_FILTERED_ARGS",
    "DEFAULT_FILTER_PARAMETERS",
    "DEFAULT_QUERY_PARAMS",
    "FILTERED_VALUE",
]
