#!/usr/bin/env python3
"""
Label Scan

Checks a product label against the known certification names. The text
comes from an image sent to the OCR service, from --text, or from a
scanned --barcode value.

Usage:
    python3 scripts/scan_label.py --image label.jpg
    python3 scripts/scan_label.py --text "כשר בהשגחת חתם סופר"
    python3 scripts/scan_label.py --barcode 7290000066318 --catalog output/catalog.json
"""

import argparse
import json
import logging
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dotenv import load_dotenv

from koshercheck.common import get_refresh_interval, load_settings, setup_logging
from koshercheck.matching import match, match_record
from koshercheck.models import CertificationRecord
from koshercheck.ocr import OCRClient, OCRError
from koshercheck.storage import JsonFileStore, KnownListService

logger = logging.getLogger(__name__)


def load_catalog(path: str) -> list:
    """Load a catalog JSON file written by extract_catalog.py."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    records = []
    for entry in data if isinstance(data, list) else []:
        try:
            records.append(CertificationRecord.from_dict(entry))
        except (TypeError, ValueError) as e:
            logger.warning("Skipping catalog entry: %s", e)
    return records


def main():
    parser = argparse.ArgumentParser(
        description="Check a label for a known kosher certification"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--image", help="Label photo to send to the OCR service")
    source.add_argument("--text", help="Label text (skip OCR)")
    source.add_argument("--barcode", help="Scanned barcode payload")
    parser.add_argument(
        "--store", "-s",
        default="data/store.json",
        help="JSON store with the downloaded list (default: data/store.json)"
    )
    parser.add_argument(
        "--catalog",
        help="Catalog JSON; also report the first product with the matched certification"
    )
    parser.add_argument(
        "--ocr-url",
        help="OCR endpoint (default: settings ocr_api_url / KOSHER_OCR_API_URL)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)
    load_dotenv()
    settings = load_settings()

    if args.image:
        try:
            with OCRClient(args.ocr_url or settings["ocr_api_url"]) as client:
                text = client.recognize_file(args.image)
        except (OCRError, OSError) as e:
            logger.error("Could not read label: %s", e)
            sys.exit(2)
    else:
        text = args.text or args.barcode

    logger.debug("Label text: %s", text)

    service = KnownListService(
        JsonFileStore(args.store),
        list_url=settings["known_list_url"],
        refresh_interval=get_refresh_interval(settings),
    )
    certification = match(text, service.get_list())

    if certification is None:
        print("No known certification found on the label.")
        sys.exit(1)

    print(f"Certification found: {certification}")

    if args.catalog:
        record = match_record(text, load_catalog(args.catalog))
        if record is not None:
            print(f"Recommended product: {record.name} ({record.company}) - {record.certification_label}")


if __name__ == "__main__":
    main()
