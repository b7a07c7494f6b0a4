"""Query – ScrubConfig value object."""
from __future__ import annotations

import dataclasses
from typing import Iterable

from logscrub.config.validation import check_names, check_placeholder
from logscrub.kernel.security import DEFAULT_FILTERED_ARGS, FILTERED_VALUE


@dataclasses.dataclass(frozen=True)
class ScrubConfig:
    """Deny-list and placeholder used by :class:`ScrubbingPrinter`.

    Built once at startup and passed explicitly; instances are immutable and
    safe to share between threads.
    """

    filtered_args: Iterable[str] = DEFAULT_FILTERED_ARGS
    filtered_value: str = FILTERED_VALUE
    # Also redact matching fields of input-object literals.
    redact_object_fields: bool = False

    def __post_init__(self) -> None:
        check_names("filtered_args", self.filtered_args)
        object.__setattr__(self, "filtered_args", frozenset(self.filtered_args))
        check_placeholder("filtered_value", self.filtered_value)

    def is_denied(self, name: str) -> bool:
        return name in self.filtered_args  # type: ignore[operator]


__all__ = ["ScrubConfig"]
