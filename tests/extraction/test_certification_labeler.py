"""Tests for koshercheck/extraction/certification_labeler.py"""

import pytest

from koshercheck.extraction.certification_labeler import CertificationLabeler
from koshercheck.models import UNKNOWN_CERTIFICATION


@pytest.fixture
def labeler(sample_patterns):
    """Create a labeler with test patterns (no config I/O)."""
    return CertificationLabeler(patterns=sample_patterns)


class TestResolve:
    def test_bold_label_priority(self, labeler):
        result = labeler.resolve(
            bold_label="  בד\"ץ   בית יוסף ",
            image_src="/images/kf.png",
            title="חתם סופר",
        )
        assert result == "בד\"ץ בית יוסף"

    def test_image_before_title(self, labeler):
        result = labeler.resolve(image_src="/images/kf_logo.png", title="מוצר חתם סופר")
        assert result == "KF"

    def test_title_fallback(self, labeler):
        result = labeler.resolve(image_src="/images/product.png", title="מוצר בהשגחת חתם סופר")
        assert result == "חתם סופר"

    def test_unknown_sentinel(self, labeler):
        result = labeler.resolve(image_src="/images/product.png", title="מוצר כלשהו")
        assert result == UNKNOWN_CERTIFICATION


class TestLabelFromText:
    def test_hebrew_fragment(self, labeler):
        assert labeler.label_from_text("כשר בית יוסף") == "בד\"ץ בית יוסף"

    def test_latin_fragment_case_insensitive(self, labeler):
        assert labeler.label_from_text("/marks/CHATAM_sofer.png") == "חתם סופר"

    def test_first_pattern_wins(self, labeler):
        assert labeler.label_from_text("חתם סופר ובית יוסף") == "חתם סופר"

    def test_rabbinate_city(self, labeler):
        assert labeler.label_from_text("שמן זית רבנות ירושלים") == "רבנות ירושלים"

    def test_rabbinate_two_word_city(self, labeler):
        assert labeler.label_from_text("מים רבנות תל אביב יפו") == "רבנות תל אביב"

    def test_rabbinate_latin_url(self, labeler):
        assert labeler.label_from_text("/images/rabbinate_haifa.png") == "Rabbinate Haifa"

    def test_rabbinate_skips_filler_words(self, labeler):
        assert labeler.label_from_text("Olive oil Rabbinate of Haifa") == "Rabbinate Haifa"
        assert labeler.label_from_text("/images/rabbinate_of_the_galil.png") == "Rabbinate Galil"

    @pytest.mark.parametrize("text", [
        "שמן הרבנות הראשית",
        "רבנות ראשית לישראל",
        "Chief Rabbinate of",
    ])
    def test_rabbinate_without_city(self, labeler, text):
        assert labeler.label_from_text(text) == ""

    def test_url_encoded_hebrew(self, labeler):
        assert labeler.label_from_text("/images/%D7%91%D7%93%D7%A5.png") == "בד\"ץ"

    @pytest.mark.parametrize("text,expected", [
        ("/images/kf.png", "KF"),
        ("OU-D", "OU"),
        ("ok kosher", "OK"),
    ])
    def test_short_abbreviations(self, labeler, text, expected):
        assert labeler.label_from_text(text) == expected

    @pytest.mark.parametrize("text", [
        "cookies",
        "/images/book_cover.png",
        "sour cream",
        "kfir",
    ])
    def test_short_abbreviations_need_token_boundaries(self, labeler, text):
        assert labeler.label_from_text(text) == ""

    def test_empty_text(self, labeler):
        assert labeler.label_from_text("") == ""


class TestDefaultPatterns:
    def test_loads_from_config(self):
        labeler = CertificationLabeler()
        assert labeler.label_from_text("בהשגחת חתם סופר") == "חתם סופר"
