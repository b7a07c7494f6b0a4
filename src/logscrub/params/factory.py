"""Params – build a ParameterFilter from settings."""
from __future__ import annotations

from logscrub.config.settings import ScrubberSettings
from logscrub.params.filter import FilterSpec, ParameterFilter
from logscrub.params.query_filter import GraphQLQueryFilter
from logscrub.query import ScrubbingPrinter


def build_parameter_filter(settings: ScrubberSettings | None = None) -> ParameterFilter:
    """Combine the key filters and the GraphQL query filter from *settings*."""
    settings = settings or ScrubberSettings()
    query_filter = GraphQLQueryFilter(
        ScrubbingPrinter(settings.to_scrub_config()),
        keys=settings.query_params,
        on_parse_error=settings.on_parse_error,
        mask=settings.filtered_value,
    )
    filters: list[FilterSpec] = [*settings.filter_parameters, query_filter]
    return ParameterFilter(filters, mask=settings.filtered_value)


__all__ = ["build_parameter_filter"]
