"""
Known certification name matching for OCR and barcode text.
"""

from .matcher import CertificationMatcher, match, match_all, match_record

__all__ = [
    'CertificationMatcher',
    'match',
    'match_all',
    'match_record',
]
