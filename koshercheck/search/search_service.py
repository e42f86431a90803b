"""
Catalog Search

Filters and suggestion helpers behind the catalog search bar. Records
may be CertificationRecord objects or their dictionary form (as read
back from the cache).
"""

import logging
import re
from typing import Any, Iterable, List, Optional, Sequence

from ..models import CertificationRecord

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_FIELDS = ('name', 'company', 'certification_label', 'notes')

# Field name -> dictionary keys it may be stored under
_FIELD_KEYS = {
    'id': ('id',),
    'name': ('name',),
    'company': ('company',),
    'certification_label': ('certification_label', 'kosherCertification'),
    'notes': ('notes',),
    'keywords': ('keywords',),
    'image_url': ('image_url', 'imgSrc'),
}

# Client-side spellings of field names
_FIELD_ALIASES = {
    'certificationLabel': 'certification_label',
    'kosherCertification': 'certification_label',
    'imageUrl': 'image_url',
    'imgSrc': 'image_url',
}


def get_field_value(record: Any, field: str) -> Any:
    """
    Read a field from a record or record dictionary.

    Args:
        record: CertificationRecord or dict
        field: Attribute name (e.g. 'certification_label')

    Returns:
        Field value, or None when absent or the record is malformed
    """
    field = _FIELD_ALIASES.get(field, field)
    if isinstance(record, CertificationRecord):
        return getattr(record, field, None)
    if isinstance(record, dict):
        for key in _FIELD_KEYS.get(field, (field,)):
            if key in record:
                return record[key]
    return None


def _matches(record: Any, term: str, fields: Sequence[str], case_sensitive: bool) -> bool:
    """Check a single record against a prepared term."""
    if not isinstance(record, (CertificationRecord, dict)):
        return False

    for field in fields:
        value = get_field_value(record, field)
        if not value:
            continue
        if isinstance(value, (list, tuple)):
            value = ' '.join(str(v) for v in value)
        value = str(value) if case_sensitive else str(value).lower()
        if term in value:
            return True
    return False


def filter_records(
    records: Any,
    term: Optional[str],
    fields: Sequence[str] = DEFAULT_SEARCH_FIELDS,
    case_sensitive: bool = False,
) -> List[Any]:
    """
    Filter a catalog by a search term.

    A record matches when the term is a substring of any selected field.
    Relative order is preserved.

    Args:
        records: Catalog (list of records or record dicts)
        term: Search term; empty or whitespace returns the catalog unchanged
        fields: Fields to search
        case_sensitive: Compare without case folding

    Returns:
        Matching records; empty list for non-list input or a non-string term
    """
    if not isinstance(records, (list, tuple)):
        logger.warning("filter_records expects a list, got %s", type(records).__name__)
        return []

    if term is not None and not isinstance(term, str):
        logger.warning("filter_records expects a string term, got %s", type(term).__name__)
        return []

    if not term or not term.strip():
        return list(records)

    needle = term.strip() if case_sensitive else term.strip().lower()
    return [
        record for record in records
        if _matches(record, needle, fields, case_sensitive)
    ]


def get_search_suggestions(
    records: Iterable[Any],
    field: str = 'name',
    limit: int = 5,
) -> List[str]:
    """
    Suggest search terms from one field of the catalog.

    Suggestions are the distinct whole values plus their individual
    words longer than two characters, sorted.

    Args:
        records: Catalog
        field: Field to draw suggestions from
        limit: Maximum number of suggestions

    Returns:
        Sorted suggestion list

    Example:
        >>> get_search_suggestions(catalog, 'company', limit=3)
        ['אנגל', 'הרדוף', 'מי עדן']
    """
    suggestions = set()
    for record in records or ():
        value = get_field_value(record, field)
        if not value:
            continue
        value = str(value)
        suggestions.add(value)
        for word in value.split():
            if len(word) > 2:
                suggestions.add(word)

    return sorted(suggestions)[:limit]


def highlight_search_term(text: str, term: str) -> str:
    """
    Wrap occurrences of the term in <mark> tags (case-insensitive).

    Example:
        >>> highlight_search_term("Milk chocolate", "milk")
        '<mark>Milk</mark> chocolate'
    """
    if not text or not term:
        return text
    return re.sub(f"({re.escape(term)})", r"<mark>\1</mark>", text, flags=re.IGNORECASE)


def _contains(value: Any, term: str) -> bool:
    return bool(value) and term.lower() in str(value).lower()


def advanced_filter(
    records: Iterable[Any],
    name: Optional[str] = None,
    company: Optional[str] = None,
    certification: Optional[str] = None,
    has_image: Optional[bool] = None,
    has_notes: Optional[bool] = None,
) -> List[Any]:
    """
    Filter by several criteria at once; all given criteria must hold.

    Args:
        records: Catalog
        name: Substring of the product name
        company: Substring of the company
        certification: Substring of the certification label
        has_image: Require (True) or exclude (False) records with an image
        has_notes: Require (True) or exclude (False) records with notes

    Returns:
        Matching records in catalog order
    """
    results = []
    for record in records or ():
        if not isinstance(record, (CertificationRecord, dict)):
            continue
        if name and not _contains(get_field_value(record, 'name'), name):
            continue
        if company and not _contains(get_field_value(record, 'company'), company):
            continue
        if certification and not _contains(get_field_value(record, 'certification_label'), certification):
            continue
        if has_image is not None:
            if bool(get_field_value(record, 'image_url')) != has_image:
                continue
        if has_notes is not None:
            notes = get_field_value(record, 'notes') or ''
            if bool(str(notes).strip()) != has_notes:
                continue
        results.append(record)
    return results
