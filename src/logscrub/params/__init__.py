"""Params – request parameter filtering for logs."""
from logscrub.params.factory import build_parameter_filter
from logscrub.params.filter import FilterSpec, ParameterFilter, ValueFilter
from logscrub.params.query_filter import GraphQLQueryFilter

__all__ = [
    "FilterSpec",
    "GraphQLQueryFilter",
    "ParameterFilter",
    "ValueFilter",
    "build_parameter_filter",
]
