"""
Client for the external OCR service.
"""

from .client import DEFAULT_OCR_API_URL, OCRClient, OCRError

__all__ = ['DEFAULT_OCR_API_URL', 'OCRClient', 'OCRError']
