"""
Catalog search and filter helpers.
"""

from .search_service import (
    DEFAULT_SEARCH_FIELDS,
    advanced_filter,
    filter_records,
    get_search_suggestions,
    highlight_search_term,
)

__all__ = [
    'DEFAULT_SEARCH_FIELDS',
    'advanced_filter',
    'filter_records',
    'get_search_suggestions',
    'highlight_search_term',
]
