"""Kernel security – process-wide redaction defaults."""
from __future__ import annotations

# GraphQL argument names whose values are replaced when printing a query.
DEFAULT_FILTERED_ARGS: frozenset[str] = frozenset({"password"})

# Request parameter keys masked by substring, case-insensitively.
DEFAULT_FILTER_PARAMETERS: tuple[str, ...] = ("password",)

# Request parameters that carry a GraphQL document. Any value logged under
# these keys is parsed as GraphQL, so unrelated fields such as an SQL
# ``query=`` log a parse warning; narrow ParameterFilterProcessor(keys=...)
# or LOGSCRUB_QUERY_PARAMS when that applies.
DEFAULT_QUERY_PARAMS: tuple[str, ...] = ("query",)

FILTERED_VALUE = "[FILTERED]"

__all__ = [
    "DEFAULT_FILTERED_ARGS",
    "DEFAULT_FILTER_PARAMETERS",
    "DEFAULT_QUERY_PARAMS",
    "FILTERED_VALUE",
]
