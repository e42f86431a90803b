"""
Catalog Cache

Keeps the last extracted catalog in a key-value store and refreshes it
at most once per calendar day, unless forced.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from ..extraction import fetch_catalog
from ..models import CertificationRecord, catalog_from_json, catalog_to_json
from .base import KeyValueStore

logger = logging.getLogger(__name__)

CATALOG_KEY = "kosherData"
LAST_UPDATE_KEY = "lastUpdateTime"


class CatalogCache:
    """
    Daily-refreshed catalog cache.

    Usage:
        cache = CatalogCache(JsonFileStore("data/store.json"))
        records = cache.load()              # cached if refreshed today
        records = cache.load(force=True)    # always refetch
    """

    def __init__(
        self,
        store: KeyValueStore,
        fetch: Callable[[], list[CertificationRecord]] = fetch_catalog,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            store: Where the catalog and its timestamp are kept
            fetch: Returns a fresh catalog; must not raise on network errors
            clock: Current time source
        """
        self.store = store
        self.fetch = fetch
        self.clock = clock

    def last_update(self) -> datetime | None:
        """Return when the catalog was last refreshed, or None."""
        value = self.store.get(LAST_UPDATE_KEY)
        if not value:
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            logger.warning("Ignoring unparseable timestamp %r", value)
            return None

    def needs_refresh(self) -> bool:
        """True if the catalog was never refreshed or not refreshed today."""
        last = self.last_update()
        return last is None or last.date() != self.clock().date()

    def cached(self) -> list[CertificationRecord] | None:
        """Return the stored catalog, or None if missing or unreadable."""
        text = self.store.get(CATALOG_KEY)
        if not text:
            return None
        try:
            return catalog_from_json(text)
        except ValueError as e:
            logger.warning("Cached catalog unreadable: %s", e)
            return None

    def refresh(self) -> list[CertificationRecord]:
        """Fetch a new catalog and replace the stored one."""
        records = self.fetch()
        self.store.set(CATALOG_KEY, catalog_to_json(records))
        self.store.set(LAST_UPDATE_KEY, self.clock().isoformat())
        logger.info("Catalog refreshed: %d records", len(records))
        return records

    def load(self, force: bool = False) -> list[CertificationRecord]:
        """
        Return the catalog, refreshing when due.

        Args:
            force: Refetch even if refreshed today

        Returns:
            Catalog
        """
        if not force and not self.needs_refresh():
            records = self.cached()
            if records is not None:
                logger.debug("Using cached catalog (%d records)", len(records))
                return records
            logger.info("No cached catalog found, fetching fresh data")
        return self.refresh()
