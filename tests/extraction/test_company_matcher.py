"""Tests for koshercheck/extraction/company_matcher.py"""

import pytest

from koshercheck.extraction.company_matcher import CompanyMatcher
from koshercheck.models import UNKNOWN_COMPANY


@pytest.fixture
def matcher(sample_known_companies):
    """Create a CompanyMatcher with test companies (no config I/O)."""
    return CompanyMatcher(companies=sample_known_companies)


class TestMatch:
    def test_hebrew_company_in_title(self, matcher):
        assert matcher.match("חלב טרי 3% תנובה") == "תנובה"

    def test_case_insensitive(self, matcher):
        assert matcher.match("OSEM bamba") == "Osem"

    def test_longest_name_wins(self, matcher):
        assert matcher.match("ספגטי פסטה זארה 500 גרם") == "פסטה זארה"

    def test_no_match_returns_placeholder(self, matcher):
        assert matcher.match("מוצר לא מוכר") == UNKNOWN_COMPANY

    def test_empty_title(self, matcher):
        assert matcher.match("") == UNKNOWN_COMPANY


class TestIsKnownCompany:
    def test_known_company(self, matcher):
        assert matcher.is_known_company("Strauss") is True

    def test_case_insensitive(self, matcher):
        assert matcher.is_known_company("strauss") is True

    def test_unknown_company(self, matcher):
        assert matcher.is_known_company("FakeCo") is False


class TestGetCanonicalName:
    def test_returns_canonical(self, matcher):
        assert matcher.get_canonical_name("osem") == "Osem"

    def test_unknown_returns_original(self, matcher):
        assert matcher.get_canonical_name("unknown") == "unknown"


class TestCompanyCount:
    def test_company_count(self, matcher, sample_known_companies):
        assert matcher.company_count == len(sample_known_companies)
