"""Application-layer errors."""

from __future__ import annotations

from typing import Any

from logscrub.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class QueryParseError(ApplicationError):
    """A GraphQL query string could not be parsed.

    The raw query is never part of the message: it may hold the very values
    the scrubber exists to hide.
    """

    default_code = "query_parse_error"

    def __init__(
        self,
        message: str = "GraphQL query could not be parsed",
        *,
        line: int | None = None,
        column: int | None = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if line is not None:
            detail["line"] = line
        if column is not None:
            detail["column"] = column
        super().__init__(message, detail=detail, **kwargs)
        self.line = line
        self.column = column


__all__ = ["ApplicationError", "QueryParseError"]
