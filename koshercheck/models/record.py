"""
Certification record model.

Pure data class for one catalog entry, plus the JSON shape the mobile
client caches and renders.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

logger = logging.getLogger(__name__)

# Sentinel label when no authority could be identified
UNKNOWN_CERTIFICATION = "כשרות לא ידועה"

# Placeholder company when the title matches no known brand
UNKNOWN_COMPANY = "-"

# UI key -> dataclass attribute
_JSON_KEYS = {
    'id': 'id',
    'name': 'name',
    'company': 'company',
    'kosherCertification': 'certification_label',
    'notes': 'notes',
    'keywords': 'keywords',
    'imgSrc': 'image_url',
}


@dataclass(frozen=True)
class CertificationRecord:
    """
    One product in the certification catalog.

    Records are immutable; a refresh replaces the whole catalog.
    """

    id: str
    name: str
    company: str = UNKNOWN_COMPANY
    certification_label: str = UNKNOWN_CERTIFICATION
    notes: str = ""
    keywords: Tuple[str, ...] = ()
    image_url: str = ""     # Absolute URL of the certification mark, or ""

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Record name is required")
        # Lists from callers are frozen into tuples
        if not isinstance(self.keywords, tuple):
            object.__setattr__(self, 'keywords', tuple(self.keywords))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the client-facing dictionary (camelCase keys)."""
        return {
            json_key: list(getattr(self, attr)) if attr == 'keywords' else getattr(self, attr)
            for json_key, attr in _JSON_KEYS.items()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CertificationRecord":
        """
        Build a record from a dictionary.

        Accepts both the camelCase client keys and the snake_case
        attribute names.

        Raises:
            ValueError: If the name is missing
            TypeError: If data is not a mapping
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected dict, got {type(data).__name__}")

        values = {}
        for json_key, attr in _JSON_KEYS.items():
            if json_key in data:
                values[attr] = data[json_key]
            elif attr in data:
                values[attr] = data[attr]

        values['id'] = str(values.get('id', ''))
        values.setdefault('name', '')
        for attr in ('name', 'company', 'certification_label', 'notes', 'image_url'):
            if attr in values:
                values[attr] = "" if values[attr] is None else str(values[attr])
        if 'company' in values and not values['company']:
            values['company'] = UNKNOWN_COMPANY
        if 'certification_label' in values and not values['certification_label']:
            values['certification_label'] = UNKNOWN_CERTIFICATION
        values['keywords'] = tuple(str(k) for k in values.get('keywords') or ())

        return cls(**values)


def catalog_to_json(records: List[CertificationRecord]) -> str:
    """
    Serialize a catalog for caching.

    Args:
        records: Catalog in display order

    Returns:
        JSON array string (UTF-8 text, not ASCII-escaped)
    """
    return json.dumps([record.to_dict() for record in records], ensure_ascii=False)


def catalog_from_json(text: str) -> List[CertificationRecord]:
    """
    Load a cached catalog.

    Entries that cannot be turned into a record are dropped.

    Args:
        text: JSON produced by catalog_to_json

    Returns:
        Catalog in stored order

    Raises:
        ValueError: If text is not a JSON array
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Cached catalog is not a JSON array")

    records = []
    for entry in data:
        try:
            records.append(CertificationRecord.from_dict(entry))
        except (TypeError, ValueError) as e:
            logger.warning("Dropping malformed cached record: %s", e)
    return records
