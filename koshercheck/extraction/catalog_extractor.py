"""
Kosharot Catalog Extractor

Extracts the recommended-products catalog from the kosharot.co.il
listing page. Each product card becomes one CertificationRecord.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Optional

import requests
from bs4 import BeautifulSoup, Tag

from ..common.config_loader import load_sample_catalog
from ..common.text_utils import clean_text
from ..models import CertificationRecord
from .certification_labeler import CertificationLabeler
from .company_matcher import CompanyMatcher
from .image_urls import DEFAULT_ORIGIN, NO_PICTURE_FILENAMES, resolve_image_url
from .parsers import CardParser

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_URL = "https://www.kosharot.co.il/index2.php?id=281&lang=HEB"

# Structural class carried by every product card
CARD_CLASS = "product-item"
CARD_SELECTOR = f"div.{CARD_CLASS}"
TITLE_FALLBACK_SELECTOR = ".product-title"

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "he-IL,he;q=0.9,en;q=0.8",
}


class CatalogExtractor:
    """Extracts certification records from the catalog page."""

    _shared_company_matcher = None
    _shared_labeler = None

    def __init__(
        self,
        url: str = DEFAULT_SOURCE_URL,
        origin: str = DEFAULT_ORIGIN,
        session: requests.Session | None = None,
        timeout: float = 30,
        company_matcher: CompanyMatcher | None = None,
        labeler: CertificationLabeler | None = None,
        no_picture_filenames=NO_PICTURE_FILENAMES,
    ):
        self.url = url
        self.origin = origin
        self.timeout = timeout
        self.no_picture_filenames = no_picture_filenames
        self._session = session
        self.html = None
        self.soup = None

        if company_matcher is None:
            if CatalogExtractor._shared_company_matcher is None:
                CatalogExtractor._shared_company_matcher = CompanyMatcher()
            company_matcher = CatalogExtractor._shared_company_matcher
        self.company_matcher = company_matcher

        if labeler is None:
            if CatalogExtractor._shared_labeler is None:
                CatalogExtractor._shared_labeler = CertificationLabeler()
            labeler = CatalogExtractor._shared_labeler
        self.labeler = labeler

    def fetch(self) -> None:
        """Fetch the catalog page HTML."""
        requester = self._session or requests
        response = requester.get(self.url, headers=REQUEST_HEADERS, timeout=self.timeout)
        response.raise_for_status()
        logger.debug("Fetched %s (%d bytes)", self.url, len(response.text))
        self.load_html(response.text)

    def load_html(self, html: str) -> None:
        """Load pre-fetched HTML for extraction without a network request."""
        self.html = html
        self.soup = BeautifulSoup(html or "", "lxml")

    def find_cards(self) -> list[Tag]:
        """
        Locate product card elements in document order.

        Uses the card selector first. When the page carries no cards under
        it, finds title elements and walks up to their card ancestor.
        """
        cards = self.soup.select(CARD_SELECTOR)
        if cards:
            return cards

        logger.debug("No '%s' cards, falling back to title elements", CARD_SELECTOR)
        cards = []
        seen = set()
        for title in self.soup.select(TITLE_FALLBACK_SELECTOR):
            card = title.find_parent(class_=CARD_CLASS)
            if card is not None and id(card) not in seen:
                seen.add(id(card))
                cards.append(card)
        return cards

    def extract(self) -> list[CertificationRecord]:
        """
        Extract all records from the loaded page.

        Cards without a title are skipped. A card that fails to parse is
        logged and skipped; the rest of the page is still extracted.

        Returns:
            Catalog in document order with sequential ids
        """
        if self.soup is None:
            raise ValueError("No HTML loaded; call fetch() or load_html() first")

        records = []
        cards = self.find_cards()
        for index, card in enumerate(cards, 1):
            try:
                record = self._extract_card(card, f"item_{len(records) + 1}")
            except (AttributeError, TypeError, ValueError) as e:
                logger.warning("Skipping card %d: %s: %s", index, type(e).__name__, e)
                continue
            if record is not None:
                records.append(record)

        logger.info("Extracted %d records from %d cards", len(records), len(cards))
        return records

    def _extract_card(self, card: Tag, record_id: str) -> Optional[CertificationRecord]:
        """Build a record from one card, or None if it has no title."""
        parser = CardParser(card)

        title = parser.extract_title()
        if not title:
            logger.debug("Card without title skipped")
            return None

        image_src = parser.extract_image_src()
        certification = self.labeler.resolve(
            bold_label=parser.extract_bold_label(),
            image_src=image_src,
            title=title,
        )

        return CertificationRecord(
            id=record_id,
            name=title,
            company=self.company_matcher.match(title),
            certification_label=clean_text(certification),
            notes=parser.extract_notes(),
            keywords=tuple(parser.extract_keywords()),
            image_url=resolve_image_url(image_src, self.origin, self.no_picture_filenames),
        )


def extract(html: str, origin: str = DEFAULT_ORIGIN, **kwargs) -> list[CertificationRecord]:
    """
    Extract a catalog from an HTML document.

    Args:
        html: Complete catalog page HTML
        origin: Scheme and host used to resolve relative image paths
        **kwargs: Passed to CatalogExtractor (matchers, placeholder names)

    Returns:
        Catalog in document order (empty when no cards are found)
    """
    extractor = CatalogExtractor(origin=origin, **kwargs)
    extractor.load_html(html)
    return extractor.extract()


def get_sample_catalog() -> list[CertificationRecord]:
    """Return the built-in sample catalog."""
    return [CertificationRecord.from_dict(entry) for entry in load_sample_catalog()]


def _requests_fetch_text(url: str, timeout: float = 30) -> str:
    """Default fetch capability: GET the URL and return its text."""
    response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout)
    response.raise_for_status()
    return response.text


def fetch_catalog(
    fetch_text: Callable[[str], str] | None = None,
    url: str = DEFAULT_SOURCE_URL,
    origin: str = DEFAULT_ORIGIN,
    use_sample_fallback: bool = True,
    timeout: float = 30,
    **kwargs,
) -> list[CertificationRecord]:
    """
    Fetch the catalog page and extract it.

    Failures never propagate: whatever the fetch capability or the
    extraction raises, and an empty result, are logged and the built-in
    sample catalog (or an empty list) is returned instead.

    Args:
        fetch_text: Callable taking a URL and returning the page text
        url: Catalog page URL
        origin: Scheme and host used to resolve relative image paths
        use_sample_fallback: Return the sample catalog on failure
        timeout: Request timeout in seconds for the default fetcher
        **kwargs: Passed to CatalogExtractor

    Returns:
        Extracted catalog, or the fallback
    """
    if fetch_text is None:
        fetch_text = partial(_requests_fetch_text, timeout=timeout)
    fallback = get_sample_catalog if use_sample_fallback else list

    try:
        html = fetch_text(url)
    except Exception as e:
        # Injected fetchers may use any HTTP client
        logger.error("Catalog source unreachable (%s): %s: %s", url, type(e).__name__, e)
        return fallback()

    try:
        records = extract(html, origin=origin, timeout=timeout, **kwargs)
    except Exception as e:
        logger.error("Catalog page could not be parsed: %s: %s", type(e).__name__, e)
        return fallback()

    if not records:
        logger.warning("Catalog page yielded no records, using fallback")
        return fallback()
    return records
