"""
Product Card Parser

Extracts the fields of one catalog card from the source page markup:
- Title from the card heading
- Remark/notes block
- Bolded certification label
- Certification mark image src
- Comma separated keywords

Selectors are tried in priority order; the first non-empty hit wins.
"""

from typing import List, Sequence

from bs4 import Tag

from ...common.text_utils import clean_text, split_keywords

TITLE_SELECTORS = ('.product-title', '.item-title', 'h3', 'h4', '.title')
NOTES_SELECTORS = ('.product-remark', '.remark', '.notes')
LABEL_SELECTORS = (
    '.product-kashrut b',
    '.product-kashrut strong',
    '.kashrut b',
    '.kashrut strong',
    'b',
    'strong',
)
KEYWORDS_SELECTORS = ('.product-keywords', '.keywords')

# Bold text inside these blocks is never the certification label
NON_LABEL_CLASSES = [
    'product-title', 'item-title', 'title',
    'product-remark', 'remark', 'notes',
    'product-keywords', 'keywords',
]


class CardParser:
    """
    Parses one product card element.

    Usage:
        parser = CardParser(card)
        title = parser.extract_title()
        label = parser.extract_bold_label()
    """

    def __init__(self, card: Tag):
        """
        Initialize the card parser.

        Args:
            card: BeautifulSoup element of a single product card
        """
        self.card = card

    def extract_title(self) -> str:
        """
        Extract the product title.

        Returns:
            Title text or empty string
        """
        return self._first_text(TITLE_SELECTORS)

    def extract_notes(self) -> str:
        """Extract the remark block text."""
        return self._first_text(NOTES_SELECTORS)

    def extract_bold_label(self) -> str:
        """
        Extract the bolded certification label.

        Bold text inside the title, remark or keywords blocks is ignored.

        Returns:
            Label text or empty string
        """
        title = self.extract_title()
        for selector in LABEL_SELECTORS:
            for element in self.card.select(selector):
                if element.find_parent(class_=NON_LABEL_CLASSES):
                    continue
                text = clean_text(element.get_text(" "))
                if text and text != title:
                    return text
        return ""

    def extract_image_src(self) -> str:
        """Return the raw src of the first image in the card."""
        img = self.card.find('img')
        if img is None:
            return ""
        return (img.get('src') or img.get('data-src') or "").strip()

    def extract_keywords(self) -> List[str]:
        """Extract keyword tokens."""
        return split_keywords(self._first_text(KEYWORDS_SELECTORS))

    def _first_text(self, selectors: Sequence[str]) -> str:
        """Return the first non-empty cleaned text for the selectors."""
        for selector in selectors:
            element = self.card.select_one(selector)
            if element:
                text = clean_text(element.get_text(" "))
                if text:
                    return text
        return ""
