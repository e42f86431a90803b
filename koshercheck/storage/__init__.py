"""
Key-value stores, the catalog cache and the known-name list refresh.
"""

from .base import JsonFileStore, KeyValueStore, MemoryStore
from .catalog_cache import CatalogCache
from .known_list import KnownListService, validate_name_list

__all__ = [
    'CatalogCache',
    'JsonFileStore',
    'KeyValueStore',
    'KnownListService',
    'MemoryStore',
    'validate_name_list',
]
