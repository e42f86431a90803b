#!/usr/bin/env python3
"""
Known Certification List Update

Downloads the known certification name list into a JSON store file.
Downloads are allowed once per refresh interval (refresh_interval_hours
in config/settings.yaml) unless --force is given.

Usage:
    python3 scripts/update_known_list.py
    python3 scripts/update_known_list.py --store data/store.json --force
    python3 scripts/update_known_list.py --show
"""

import argparse
import logging
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import requests
from dotenv import load_dotenv

from koshercheck.common import get_refresh_interval, get_request_timeout, load_settings, setup_logging
from koshercheck.storage import JsonFileStore, KnownListService

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Update the known certification name list"
    )
    parser.add_argument(
        "--store", "-s",
        default="data/store.json",
        help="JSON store file (default: data/store.json)"
    )
    parser.add_argument(
        "--url",
        help="List endpoint (default: settings known_list_url / KOSHER_LIST_URL)"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Download even if updated within the refresh interval"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the current list and last update time without downloading"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)
    load_dotenv()

    settings = load_settings()
    service = KnownListService(
        JsonFileStore(args.store),
        list_url=args.url or settings["known_list_url"],
        refresh_interval=get_refresh_interval(settings),
        timeout=get_request_timeout(settings),
    )

    if not args.show:
        try:
            if service.update(force=args.force):
                print("Certification list updated.")
            else:
                print("Recently updated. The list can be updated once per refresh interval (use --force).")
        except (requests.RequestException, ValueError) as e:
            logger.error("Update failed: %s", e)
            print(f"Update failed: could not update the list ({e})")
            sys.exit(1)

    last = service.last_update()
    print(f"Last updated: {last.strftime('%a %b %d %Y') if last else 'Never'}")
    names = service.get_list()
    print(f"Known names: {len(names)}")
    if args.show or args.verbose:
        for name in names:
            print(f"  - {name}")


if __name__ == "__main__":
    main()
