"""
Known Certification List

Downloads the known certification name list from a JSON endpoint and
keeps it in a key-value store. Downloads are limited to one per cool-down
interval unless forced. Until a list has been downloaded, the bundled
list from config/known_certifications.yaml is used.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta
from functools import partial
from typing import Any, Callable

import requests

from ..common.config_loader import load_known_certifications
from .base import KeyValueStore

logger = logging.getLogger(__name__)

LIST_KEY = "kosher_list_json_v1"
META_KEY = "kosher_list_updated_at_v1"

REFRESH_INTERVAL = timedelta(hours=24)


def _requests_fetch_json(url: str, timeout: float = 30) -> Any:
    """Default fetch capability: GET the URL and decode JSON."""
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.json()


def validate_name_list(data: Any) -> list[str]:
    """
    Check that a downloaded payload is a JSON array of strings.

    Raises:
        ValueError: If the payload has another shape
    """
    if not isinstance(data, list):
        raise ValueError(f"Known-name list must be a JSON array, got {type(data).__name__}")
    for index, name in enumerate(data):
        if not isinstance(name, str):
            raise ValueError(f"Known-name list entry {index} is not a string: {name!r}")
    return list(data)


class KnownListService:
    """
    Known certification names with a rate-limited refresh.

    Usage:
        service = KnownListService(store, list_url="https://example.com/kosher-list.json")
        if service.should_refresh():
            service.update()
        names = service.get_list()
    """

    def __init__(
        self,
        store: KeyValueStore,
        list_url: str,
        fetch_json: Callable[[str], Any] | None = None,
        clock: Callable[[], datetime] = datetime.now,
        refresh_interval: timedelta = REFRESH_INTERVAL,
        timeout: float = 30,
    ):
        self.store = store
        self.list_url = list_url
        self.fetch_json = fetch_json or partial(_requests_fetch_json, timeout=timeout)
        self.clock = clock
        self.refresh_interval = refresh_interval

    def get_list(self) -> list[str]:
        """Return the stored list, or the bundled list if none is stored."""
        stored = self.store.get(LIST_KEY)
        if stored:
            try:
                return validate_name_list(json.loads(stored))
            except ValueError as e:
                logger.warning("Stored known-name list unreadable, using bundled list: %s", e)
        return load_known_certifications()

    def last_update(self) -> datetime | None:
        """Return when the list was last downloaded, or None."""
        value = self.store.get(META_KEY)
        if not value:
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            logger.warning("Ignoring unparseable timestamp %r", value)
            return None

    def should_refresh(self) -> bool:
        """True if never downloaded or the cool-down interval has passed."""
        last = self.last_update()
        if last is None:
            return True
        return self.clock() - last > self.refresh_interval

    def update(self, force: bool = False) -> bool:
        """
        Download and store the list.

        Args:
            force: Ignore the cool-down interval

        Returns:
            True if the list was downloaded, False if skipped by the cool-down

        Raises:
            requests.RequestException: If the download fails
            ValueError: If the payload is not a JSON array of strings
        """
        if not force and not self.should_refresh():
            logger.info("Known-name list updated recently, skipping download")
            return False

        names = validate_name_list(self.fetch_json(self.list_url))
        self.store.set(LIST_KEY, json.dumps(names, ensure_ascii=False))
        self.store.set(META_KEY, self.clock().isoformat())
        logger.info("Known-name list updated: %d names", len(names))
        return True
