"""Domain layer primitives (filter state, translation, pagination, exceptions)."""

from . import exceptions
from .filters import SearchFilters
from .pagination import Paginator
from .query import ListingQuery, parse_query_params, to_query_params, to_query_string
from .session import ListingRequest, LoadState, SearchSession

__all__ = [
    "ListingQuery",
    "ListingRequest",
    "LoadState",
    "Paginator",
    "SearchFilters",
    "SearchSession",
    "exceptions",
    "parse_query_params",
    "to_query_params",
    "to_query_string",
]
