"""PocketBase query parameters — filter, fields, auto-expand, sort, pagination."""

from __future__ import annotations

from .auth import RecordAuthResponse
from .binding import bind_filter, format_filter_value
from .config import DEFAULT_CONFIG, ParamsConfig
from .exceptions import PocketBaseParamsError, UnboundPlaceholderError
from .expand import ExpandPathExtractor
from .filter_builder import FilterBuilder, RestrictedFilterBuilder
from .operators import DATETIME_MACROS, FilterOperator, is_date_macro
from .params import BuildResult, ParamsBuilder, QueryParams, RawFilter, pb_params
from .placeholders import ValuePlaceholderRegistry
from .query_string import QueryStringBuilder

__all__ = [
    # Entry point
    "pb_params",
    "ParamsBuilder",
    "QueryParams",
    "BuildResult",
    "RawFilter",
    # Filter building
    "FilterBuilder",
    "RestrictedFilterBuilder",
    "ValuePlaceholderRegistry",
    "FilterOperator",
    "DATETIME_MACROS",
    "is_date_macro",
    # Expansion
    "ExpandPathExtractor",
    # Configuration
    "ParamsConfig",
    "DEFAULT_CONFIG",
    # Helpers
    "bind_filter",
    "format_filter_value",
    "QueryStringBuilder",
    "RecordAuthResponse",
    # Exceptions
    "PocketBaseParamsError",
    "UnboundPlaceholderError",
]
