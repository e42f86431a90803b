"""Tests for koshercheck/extraction/parsers/card_parser.py"""

from bs4 import BeautifulSoup

from koshercheck.extraction.parsers.card_parser import CardParser


def make_parser(html: str) -> CardParser:
    """Create a CardParser for the first element of an HTML fragment."""
    soup = BeautifulSoup(html, "lxml")
    return CardParser(soup.body.find())


class TestExtractTitle:
    def test_product_title_class(self):
        parser = make_parser('<div><h3 class="product-title">Product Title</h3></div>')
        assert parser.extract_title() == "Product Title"

    def test_heading_fallback(self):
        parser = make_parser("<div><h4>Fallback Title</h4></div>")
        assert parser.extract_title() == "Fallback Title"

    def test_no_title_returns_empty(self):
        parser = make_parser("<div><p>No heading</p></div>")
        assert parser.extract_title() == ""

    def test_whitespace_cleaned(self):
        parser = make_parser('<div><h3 class="product-title">  Spaced \n  Title&nbsp; </h3></div>')
        assert parser.extract_title() == "Spaced Title"

    def test_empty_title_element_skipped(self):
        parser = make_parser('<div><h3 class="product-title"> </h3><h4>Real</h4></div>')
        assert parser.extract_title() == "Real"


class TestExtractBoldLabel:
    def test_kashrut_block(self):
        parser = make_parser(
            '<div><h3>שמן</h3><div class="product-kashrut">כשרות: <b>חתם סופר</b></div></div>'
        )
        assert parser.extract_bold_label() == "חתם סופר"

    def test_generic_bold(self):
        parser = make_parser("<div><h3>שמן</h3><strong>בית יוסף</strong></div>")
        assert parser.extract_bold_label() == "בית יוסף"

    def test_bold_inside_remark_ignored(self):
        parser = make_parser(
            '<div><h3>שמן</h3><div class="product-remark"><b>כשר לפסח</b></div></div>'
        )
        assert parser.extract_bold_label() == ""

    def test_bold_title_ignored(self):
        parser = make_parser("<div><h3><b>שמן זית</b></h3></div>")
        assert parser.extract_bold_label() == ""


class TestExtractNotes:
    def test_remark_block(self):
        parser = make_parser('<div><div class="product-remark">כשר  לפסח</div></div>')
        assert parser.extract_notes() == "כשר לפסח"

    def test_no_remark(self):
        parser = make_parser("<div><h3>x</h3></div>")
        assert parser.extract_notes() == ""


class TestExtractImageSrc:
    def test_src(self):
        parser = make_parser('<div><img src=" /images/kf.png "></div>')
        assert parser.extract_image_src() == "/images/kf.png"

    def test_data_src(self):
        parser = make_parser('<div><img data-src="/images/ou.png"></div>')
        assert parser.extract_image_src() == "/images/ou.png"

    def test_no_image(self):
        parser = make_parser("<div><h3>x</h3></div>")
        assert parser.extract_image_src() == ""


class TestExtractKeywords:
    def test_split_on_commas(self):
        parser = make_parser('<div><div class="product-keywords">חלב, גבינה ,יוגורט</div></div>')
        assert parser.extract_keywords() == ["חלב", "גבינה", "יוגורט"]

    def test_no_keywords(self):
        parser = make_parser("<div><h3>x</h3></div>")
        assert parser.extract_keywords() == []
