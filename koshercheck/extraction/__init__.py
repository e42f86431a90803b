"""
Catalog extraction for the kosharot.co.il recommended-products page.

Modules:
    catalog_extractor - CatalogExtractor and the extract/fetch_catalog helpers
    certification_labeler - Certification authority label derivation
    company_matcher - Company derivation from product titles
    image_urls - Image URL resolution
    parsers - Per-card field parsing
"""

from .catalog_extractor import (
    DEFAULT_SOURCE_URL,
    CatalogExtractor,
    extract,
    fetch_catalog,
    get_sample_catalog,
)
from .certification_labeler import CertificationLabeler
from .company_matcher import CompanyMatcher
from .image_urls import DEFAULT_ORIGIN, resolve_image_url
from .parsers import CardParser

__all__ = [
    # Extractor
    'CatalogExtractor',
    'DEFAULT_SOURCE_URL',
    'extract',
    'fetch_catalog',
    'get_sample_catalog',
    # Field derivation
    'CertificationLabeler',
    'CompanyMatcher',
    'DEFAULT_ORIGIN',
    'resolve_image_url',
    # Parsers
    'CardParser',
]
