"""
Certification Matcher

Decides whether OCR output or a barcode payload names a known
certification. Both sides are normalized with normalize_for_match and
compared by containment; the first candidate in list order wins.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..common.text_utils import normalize_for_match
from ..models import CertificationRecord

logger = logging.getLogger(__name__)


def match(free_text: str, known_names: Iterable[str]) -> Optional[str]:
    """
    Find the first known certification name contained in a text.

    Args:
        free_text: OCR output or barcode value
        known_names: Candidate names in priority order

    Returns:
        The matching candidate as given (not normalized), or None

    Example:
        >>> match("מוצר זה כשר בחתם סופר למהדרין", ["חתם סופר", "בית יוסף"])
        'חתם סופר'
    """
    haystack = normalize_for_match(free_text)
    for name in known_names or ():
        needle = normalize_for_match(name)
        if needle and needle in haystack:
            return name
    return None


def match_all(free_text: str, known_names: Iterable[str]) -> list[str]:
    """Return every known name contained in the text, in list order."""
    haystack = normalize_for_match(free_text)
    matches = []
    for name in known_names or ():
        needle = normalize_for_match(name)
        if needle and needle in haystack:
            matches.append(name)
    return matches


def match_record(
    free_text: str,
    catalog: Sequence[CertificationRecord],
) -> Optional[CertificationRecord]:
    """
    Find the first catalog record whose certification label is named in a text.

    Args:
        free_text: OCR output or barcode value
        catalog: Catalog in display order

    Returns:
        Matching record or None
    """
    labels = [record.certification_label for record in catalog]
    label = match(free_text, labels)
    if label is None:
        return None
    return catalog[labels.index(label)]


class CertificationMatcher:
    """
    Matcher with the known-name list normalized once.

    Usage:
        matcher = CertificationMatcher(["חתם סופר", "בית יוסף"])
        matcher.match("כשר בהשגחת חתם סופר")
        # Returns: "חתם סופר"
    """

    def __init__(self, known_names: Iterable[str]):
        self.known_names = list(known_names)
        self._needles = [
            (name, normalize_for_match(name)) for name in self.known_names
        ]
        skipped = sum(1 for _, needle in self._needles if not needle)
        if skipped:
            logger.debug("%d known names normalize to empty and are ignored", skipped)

    def match(self, free_text: str) -> Optional[str]:
        """Return the first known name contained in the text, or None."""
        haystack = normalize_for_match(free_text)
        for name, needle in self._needles:
            if needle and needle in haystack:
                return name
        return None

    def __len__(self) -> int:
        return len(self.known_names)
