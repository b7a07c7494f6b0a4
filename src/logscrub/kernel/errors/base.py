"""Root error class for the logscrub error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    These errors are reported from inside the logging path, next to the data
    being scrubbed, so the triggering exception is only ever named by type:
    a parser message may quote the very token that had to be hidden.

    Args:
        message: Human-readable description; must not embed scrubbed input.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Structured context merged into :meth:`to_log_fields`.
        cause: Original exception; chained, reported by type name only.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_log_fields(self) -> dict[str, Any]:
        """Keyword arguments for a structlog call describing this error."""
        fields: dict[str, Any] = {"code": self.code, **self.detail}
        if self.cause is not None:
            fields["cause"] = type(self.cause).__name__
        return fields


__all__ = ["BaseError"]
