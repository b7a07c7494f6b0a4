"""Params – ParameterFilter.

Masks request parameters before they reach a log line.  Filters come in three
kinds:

* ``str`` – case-insensitive substring of the key (``"pass"`` masks
  ``"password"`` and ``"PASSWORD_CONFIRMATION"``);
* compiled :class:`re.Pattern` – matched against the key with ``search``;
* callables ``(key, value) -> value`` – run on leaf values whose key matched
  no string or pattern filter, e.g. :class:`GraphQLQueryFilter`.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Mapping, Union

from logscrub.kernel.security import FILTERED_VALUE

ValueFilter = Callable[[str, Any], Any]
FilterSpec = Union[str, "re.Pattern[str]", ValueFilter]


class ParameterFilter:
    """Return filtered copies of (possibly nested) request parameters."""

    def __init__(self, filters: Iterable[FilterSpec] = (), mask: Any = FILTERED_VALUE) -> None:
        self._mask = mask
        self._patterns: list[re.Pattern[str]] = []
        self._callables: list[ValueFilter] = []
        strings: list[str] = []
        for item in filters:
            if isinstance(item, str):
                strings.append(re.escape(item))
            elif isinstance(item, re.Pattern):
                self._patterns.append(item)
            elif callable(item):
                self._callables.append(item)
            else:
                raise TypeError(f"Unsupported parameter filter: {item!r}")
        if strings:
            self._patterns.insert(0, re.compile("|".join(strings), re.IGNORECASE))

    @property
    def mask(self) -> Any:
        return self._mask

    def filter(self, params: Mapping[str, Any]) -> dict[str, Any]:  # noqa: A003
        return {key: self.filter_param(key, value) for key, value in params.items()}

    def filter_param(self, key: Any, value: Any) -> Any:
        name = str(key)
        if any(pattern.search(name) for pattern in self._patterns):
            return self._mask
        return self._filter_value(name, value)

    def _filter_value(self, key: str, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.filter(value)
        if isinstance(value, (list, tuple)):
            return self._filter_sequence(key, value)
        for fn in self._callables:
            value = fn(key, value)
        return value

    def _filter_sequence(self, key: str, items: list[Any] | tuple[Any, ...]) -> Any:
        filtered = [self._filter_value(key, item) for item in items]
        if isinstance(items, list):
            return filtered
        # tuples keep their type; named tuples take positional fields
        if hasattr(items, "_fields"):
            return type(items)(*filtered)
        return type(items)(filtered)


__all__ = ["FilterSpec", "ParameterFilter", "ValueFilter"]
