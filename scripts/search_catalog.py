#!/usr/bin/env python3
"""
Catalog Search

Searches a saved catalog JSON file the way the app's search bar does.

Usage:
    python3 scripts/search_catalog.py --catalog output/catalog.json --term חלב
    python3 scripts/search_catalog.py --catalog output/catalog.json --term osem --fields company
    python3 scripts/search_catalog.py --catalog output/catalog.json --suggest company
"""

import argparse
import json
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from koshercheck.common import setup_logging
from koshercheck.search import (
    DEFAULT_SEARCH_FIELDS,
    advanced_filter,
    filter_records,
    get_search_suggestions,
)


def main():
    parser = argparse.ArgumentParser(description="Search a saved certification catalog")
    parser.add_argument("--catalog", "-c", required=True, help="Catalog JSON file")
    parser.add_argument("--term", "-t", default="", help="Search term")
    parser.add_argument(
        "--fields",
        nargs="+",
        default=list(DEFAULT_SEARCH_FIELDS),
        choices=list(DEFAULT_SEARCH_FIELDS),
        help="Fields to search (default: all)"
    )
    parser.add_argument("--case-sensitive", action="store_true", help="Case-sensitive matching")
    parser.add_argument("--with-image", action="store_true", help="Only records with an image")
    parser.add_argument("--with-notes", action="store_true", help="Only records with notes")
    parser.add_argument(
        "--suggest",
        choices=list(DEFAULT_SEARCH_FIELDS),
        help="Print search suggestions for a field instead of searching"
    )
    parser.add_argument("--limit", "-l", type=int, default=5, help="Suggestion count (default: 5)")

    args = parser.parse_args()
    setup_logging(quiet=True)

    if not os.path.exists(args.catalog):
        print(f"Catalog file not found: {args.catalog}")
        sys.exit(1)

    with open(args.catalog, "r", encoding="utf-8") as f:
        records = json.load(f)

    if args.suggest:
        for suggestion in get_search_suggestions(records, args.suggest, args.limit):
            print(suggestion)
        return

    results = filter_records(records, args.term, args.fields, args.case_sensitive)
    results = advanced_filter(
        results,
        has_image=True if args.with_image else None,
        has_notes=True if args.with_notes else None,
    )

    print(f"{len(results)} of {len(records) if isinstance(records, list) else 0} records")
    for record in results:
        print(f"  {record.get('name')} | {record.get('company')} | {record.get('kosherCertification')}")


if __name__ == "__main__":
    main()
