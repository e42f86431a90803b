"""
Data models for the certification catalog.

This module contains pure data classes with no business logic.
"""

from .record import (
    UNKNOWN_CERTIFICATION,
    UNKNOWN_COMPANY,
    CertificationRecord,
    catalog_from_json,
    catalog_to_json,
)

__all__ = [
    'CertificationRecord',
    'UNKNOWN_CERTIFICATION',
    'UNKNOWN_COMPANY',
    'catalog_from_json',
    'catalog_to_json',
]
