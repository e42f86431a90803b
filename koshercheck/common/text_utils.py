"""
Text Utilities

Whitespace cleanup and the match normalization shared by the extractor,
the matcher and the search helpers.
"""

import re
import unicodedata
from typing import List, Optional

_WHITESPACE_RE = re.compile(r'\s+')

# Latin letters, Hebrew letters (alef..tav), digits and whitespace survive
_DISALLOWED_RE = re.compile(r'[^a-zא-ת0-9\s]')

_KEYWORD_SEPARATORS_RE = re.compile(r'[,،]')


def clean_text(text: Optional[str]) -> str:
    """
    Collapse whitespace and trim.

    Non-breaking spaces count as regular whitespace.

    Args:
        text: Raw text (may be None)

    Returns:
        Cleaned text or empty string
    """
    if not text:
        return ""
    text = text.replace("\u00a0", " ")
    return _WHITESPACE_RE.sub(' ', text).strip()


def normalize_for_match(text: Optional[str]) -> str:
    """
    Canonicalize text for containment matching.

    Lowercases, applies NFKD decomposition, drops combining marks (this
    removes Hebrew niqqud and cantillation), replaces everything outside
    Latin/Hebrew letters, digits and whitespace with a space, then
    collapses whitespace.

    Args:
        text: Raw text (may be None)

    Returns:
        Normalized text

    Example:
        >>> normalize_for_match("Chatam-Sofer (Bnei Brak)")
        'chatam sofer bnei brak'
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize('NFKD', text.lower())
    stripped = ''.join(ch for ch in decomposed if unicodedata.category(ch) != 'Mn')
    # NFKD can expose new uppercase forms (e.g. ligatures), lowercase again
    restricted = _DISALLOWED_RE.sub(' ', stripped.lower())
    return _WHITESPACE_RE.sub(' ', restricted).strip()


def split_keywords(text: Optional[str]) -> List[str]:
    """
    Split a comma separated keywords block into trimmed tokens.

    Args:
        text: Keywords block text

    Returns:
        Tokens in original order, empty tokens dropped
    """
    if not text:
        return []
    tokens = (clean_text(token) for token in _KEYWORD_SEPARATORS_RE.split(text))
    return [token for token in tokens if token]
