"""
Certification Labeler

Assigns a certification authority label to a catalog card.

Priority order:
1. Bolded label text inside the card
2. Authority pattern found in the image URL (mark filenames name the authority)
3. Authority pattern found in the product title
4. UNKNOWN_CERTIFICATION

Patterns are loaded from config/certification_patterns.yaml.
"""

import re
from typing import Any, Dict, List, Optional, Pattern, Tuple
from urllib.parse import unquote

from ..common.config_loader import load_certification_patterns
from ..common.text_utils import clean_text
from ..models import UNKNOWN_CERTIFICATION

# City names that take two words
_TWO_WORD_CITY_PREFIXES = frozenset({
    'תל', 'בני', 'פתח', 'ראשון', 'רמת', 'קרית', 'באר', 'כפר', 'בית', 'נוף', 'מעלה',
    'tel', 'bnei', 'petah', 'petach', 'rishon', 'ramat', 'kiryat', 'beer', 'kfar', 'beit',
})

# Words after a rabbinate prefix that never start a city name
_CITY_FILLER_WORDS = ('of', 'the')
_NON_CITY_WORDS = frozenset({'הראשית', 'ראשית', 'chief', 'main', *_CITY_FILLER_WORDS})

# Latin fragments this short only match as whole tokens
_SHORT_FRAGMENT_LEN = 3


def _fragment_regex(fragment: str) -> Pattern:
    """Compile a case-insensitive regex for one fragment."""
    escaped = re.escape(fragment.lower())
    if len(fragment) <= _SHORT_FRAGMENT_LEN:
        return re.compile(rf'(?<![a-z0-9א-ת]){escaped}(?![a-z0-9א-ת])')
    return re.compile(escaped)


class CertificationLabeler:
    """
    Derives certification labels from card text.

    Usage:
        labeler = CertificationLabeler()
        label = labeler.resolve(
            bold_label="",
            image_src="https://www.kosharot.co.il/images/kf_logo.png",
            title="Biscuits",
        )
        # Returns: "KF"
    """

    def __init__(self, patterns: Optional[List[Dict[str, Any]]] = None):
        """
        Initialize the labeler.

        Args:
            patterns: Ordered pattern entries. If None, loads from config.
                Each entry is either {'label', 'fragments'} or
                {'city_prefixes'}.
        """
        if patterns is None:
            patterns = load_certification_patterns()

        self._rules: List[Tuple[str, Any]] = []
        for entry in patterns:
            if entry.get('city_prefixes'):
                for prefix in entry['city_prefixes']:
                    city_re = re.compile(
                        rf'(?<![a-z0-9א-ת]){re.escape(prefix.lower())}[\s_\-]+'
                        rf'(?:(?:{"|".join(_CITY_FILLER_WORDS)})[\s_\-]+)*'
                        r'([^\s_\-,.;:()/"\']+)'
                        r'(?:[\s_\-]+([^\s_\-,.;:()/"\']+))?'
                    )
                    self._rules.append(('city', (prefix, city_re)))
            elif entry.get('label'):
                regexes = [_fragment_regex(f) for f in entry.get('fragments', []) if f]
                self._rules.append(('fragments', (entry['label'], regexes)))

    def label_from_text(self, text: str) -> str:
        """
        Find the first authority pattern present in a text.

        Args:
            text: Title, URL or any free text

        Returns:
            Label of the first matching pattern, or empty string
        """
        if not text:
            return ""

        haystack = unquote(text).lower()
        for kind, rule in self._rules:
            if kind == 'city':
                prefix, city_re = rule
                match = city_re.search(haystack)
                if match:
                    city = match.group(1)
                    if city in _NON_CITY_WORDS:
                        continue
                    if city in _TWO_WORD_CITY_PREFIXES and match.group(2):
                        city = f"{city} {match.group(2)}"
                    if city.isascii():
                        city = city.title()
                    return f"{prefix} {city}"
            else:
                label, regexes = rule
                if any(regex.search(haystack) for regex in regexes):
                    return label

        return ""

    def resolve(self, bold_label: str = "", image_src: str = "", title: str = "") -> str:
        """
        Pick the certification label for a card.

        Args:
            bold_label: Text of the bolded certification element
            image_src: Image URL text of the certification mark
            title: Product title

        Returns:
            Certification label, UNKNOWN_CERTIFICATION if nothing matched
        """
        label = clean_text(bold_label)
        if label:
            return label

        return (
            self.label_from_text(image_src)
            or self.label_from_text(title)
            or UNKNOWN_CERTIFICATION
        )
