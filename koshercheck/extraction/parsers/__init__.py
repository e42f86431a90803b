"""
Parsers for pieces of the catalog page.

- CardParser: fields of a single product card
"""

from .card_parser import CardParser

__all__ = [
    'CardParser',
]
