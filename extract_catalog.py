#!/usr/bin/env python3
"""
Catalog Extraction

Fetches the recommended-products page (or reads a saved copy), extracts
the certification catalog and prints a report.

Usage:
    python3 extract_catalog.py
    python3 extract_catalog.py --html saved_page.html --output output/catalog.json
    python3 extract_catalog.py --store data/store.json --force
"""

import argparse
import json
import logging
import os
import sys
from collections import Counter

from dotenv import load_dotenv

from koshercheck.common import get_request_timeout, load_settings, setup_logging
from koshercheck.extraction import extract, fetch_catalog
from koshercheck.models import UNKNOWN_CERTIFICATION, UNKNOWN_COMPANY
from koshercheck.storage import CatalogCache, JsonFileStore

logger = logging.getLogger(__name__)


def print_report(records: list, source: str) -> None:
    """Print a summary of the extracted catalog."""
    print("\n" + "=" * 80)
    print("CATALOG EXTRACTION REPORT")
    print("=" * 80)
    print(f"\nSource: {source}")
    print(f"Records: {len(records)}")

    unknown_labels = sum(1 for r in records if r.certification_label == UNKNOWN_CERTIFICATION)
    unknown_companies = sum(1 for r in records if r.company == UNKNOWN_COMPANY)
    with_images = sum(1 for r in records if r.image_url)

    print(f"\n  Unknown certification: {unknown_labels}")
    print(f"  Unknown company:       {unknown_companies}")
    print(f"  With image:            {with_images}")

    print("\nCERTIFICATIONS:")
    for label, count in Counter(r.certification_label for r in records).most_common():
        print(f"  {count:5}  {label}")

    print("\n" + "-" * 80)
    for record in records[:10]:
        print(f"  [{record.id}] {record.name} | {record.company} | {record.certification_label}")
    if len(records) > 10:
        print(f"  ... and {len(records) - 10} more")
    print("=" * 80)


def main():
    parser = argparse.ArgumentParser(
        description="Extract the kosher certification catalog"
    )
    parser.add_argument(
        "--html",
        help="Read a saved HTML page instead of fetching"
    )
    parser.add_argument(
        "--url",
        help="Catalog page URL (default: settings source_url)"
    )
    parser.add_argument(
        "--output", "-o",
        default="output/catalog.json",
        help="Output JSON path (default: output/catalog.json)"
    )
    parser.add_argument(
        "--store",
        help="JSON store file; enables the once-per-day cache"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Refresh the cached catalog even if updated today"
    )
    parser.add_argument(
        "--no-sample-fallback",
        action="store_true",
        help="Return an empty catalog instead of sample data on failure"
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

    try:
        settings = load_settings()
        url = args.url or settings["source_url"]
        origin = settings.get("source_origin", "https://www.kosharot.co.il")
        extractor_kwargs = {
            "no_picture_filenames": settings.get("no_picture_filenames", ["no_pic.gif"]),
        }

        if args.html:
            with open(args.html, "r", encoding="utf-8") as f:
                records = extract(f.read(), origin=origin, **extractor_kwargs)
            source = args.html
        else:
            def fetch():
                return fetch_catalog(
                    url=url,
                    origin=origin,
                    use_sample_fallback=not args.no_sample_fallback,
                    timeout=get_request_timeout(settings),
                    **extractor_kwargs,
                )

            if args.store:
                records = CatalogCache(JsonFileStore(args.store), fetch=fetch).load(force=args.force)
            else:
                records = fetch()
            source = url

        print_report(records, source)

        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump([r.to_dict() for r in records], f, indent=2, ensure_ascii=False)
        print(f"\nCatalog saved to: {args.output}")

    except (OSError, ValueError) as e:
        logger.error("Extraction failed: %s", e)
        sys.exit(1)

    sys.exit(0 if records else 1)


if __name__ == "__main__":
    main()
