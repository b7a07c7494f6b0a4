"""Params – GraphQLQueryFilter."""
from __future__ import annotations

from typing import Any, Iterable

from logscrub.config.settings.base import PARSE_ERROR_MODES
from logscrub.config.validation import InvalidSettingValueError
from logscrub.kernel.errors import QueryParseError
from logscrub.kernel.security import DEFAULT_QUERY_PARAMS, FILTERED_VALUE
from logscrub.observability.logging.processors import get_logger
from logscrub.query import ScrubbingPrinter

logger = get_logger(__name__)


class GraphQLQueryFilter:
    """Value filter that scrubs GraphQL documents carried in request params.

    Register it with :class:`~logscrub.params.ParameterFilter`; it rewrites
    string values under *keys* through :class:`ScrubbingPrinter` and leaves
    everything else alone.

    Parameters
    ----------
    printer:
        Printer holding the argument deny-list.
    keys:
        Parameter names that carry a GraphQL document.
    on_parse_error:
        ``"keep"`` returns an unparseable value as is; ``"filter"`` replaces
        it with *mask*.
    """

    def __init__(
        self,
        printer: ScrubbingPrinter | None = None,
        keys: Iterable[str] = DEFAULT_QUERY_PARAMS,
        on_parse_error: str = "keep",
        mask: Any = FILTERED_VALUE,
    ) -> None:
        if on_parse_error not in PARSE_ERROR_MODES:
            raise InvalidSettingValueError(
                "on_parse_error",
                on_parse_error,
                f"expected one of {', '.join(PARSE_ERROR_MODES)}",
            )
        self._printer = printer or ScrubbingPrinter()
        self._keys = frozenset(keys)
        self._on_parse_error = on_parse_error
        self._mask = mask

    def __call__(self, key: str, value: Any) -> Any:
        if key not in self._keys or not isinstance(value, str):
            return value
        try:
            return self._printer.print_source(value)
        except QueryParseError as exc:
            logger.warning(
                "graphql_query.unparseable",
                param=key,
                action=self._on_parse_error,
                **exc.to_log_fields(),
            )
            if self._on_parse_error == "filter":
                return self._mask
            return value


__all__ = ["GraphQLQueryFilter"]
