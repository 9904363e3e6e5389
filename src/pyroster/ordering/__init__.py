"""Ordering engine for roster views."""

from .service import DEFAULT_SORT, SortConfig, SortDirection, SortField, request_sort, sort_players

__all__ = ["DEFAULT_SORT", "SortConfig", "SortDirection", "SortField", "request_sort", "sort_players"]
