"""Tests for koshercheck/common/config_loader.py"""

from datetime import timedelta

import pytest

from koshercheck.common.config_loader import (
    get_companies_lowercase_map,
    get_refresh_interval,
    get_request_timeout,
    load_certification_patterns,
    load_config,
    load_known_certifications,
    load_known_companies,
    load_sample_catalog,
    load_settings,
)


class TestGetCompaniesLowercaseMap:
    def test_builds_mapping(self, sample_known_companies):
        result = get_companies_lowercase_map(sample_known_companies)
        assert result["osem"] == "Osem"
        assert result["strauss"] == "Strauss"
        assert result["תנובה"] == "תנובה"

    def test_empty_companies(self):
        assert get_companies_lowercase_map([]) == {}


class TestLoadSettings:
    def test_defaults_from_file(self):
        settings = load_settings(environ={})
        assert settings["source_url"].startswith("https://www.kosharot.co.il/")
        assert settings["source_origin"] == "https://www.kosharot.co.il"
        assert settings["refresh_interval_hours"] == 24

    def test_environment_overrides(self):
        settings = load_settings(environ={
            "KOSHER_LIST_URL": "https://lists.example/kosher.json",
            "KOSHER_OCR_API_URL": "http://ocr.local/ocr",
        })
        assert settings["known_list_url"] == "https://lists.example/kosher.json"
        assert settings["ocr_api_url"] == "http://ocr.local/ocr"

    def test_empty_environment_value_ignored(self):
        settings = load_settings(environ={"KOSHER_SOURCE_URL": ""})
        assert settings["source_url"].startswith("https://www.kosharot.co.il/")


class TestSettingsHelpers:
    def test_refresh_interval_from_settings(self):
        assert get_refresh_interval({"refresh_interval_hours": 6}) == timedelta(hours=6)

    def test_refresh_interval_default(self):
        assert get_refresh_interval({}) == timedelta(hours=24)

    def test_refresh_interval_from_file(self):
        assert get_refresh_interval() == timedelta(hours=24)

    def test_request_timeout_from_settings(self):
        assert get_request_timeout({"request_timeout": 5}) == 5.0

    def test_request_timeout_default(self):
        assert get_request_timeout({}) == 30.0


class TestLoadFromConfigFiles:
    """Tests that load real config YAML files from the repo."""

    def test_load_known_companies(self):
        companies = load_known_companies()
        assert isinstance(companies, list)
        assert "תנובה" in companies

    def test_load_certification_patterns(self):
        patterns = load_certification_patterns()
        labels = [p.get("label") for p in patterns]
        assert "חתם סופר" in labels
        assert any(p.get("city_prefixes") for p in patterns)

    def test_load_known_certifications(self):
        names = load_known_certifications()
        assert "חתם סופר" in names
        assert all(isinstance(n, str) for n in names)

    def test_load_sample_catalog(self):
        entries = load_sample_catalog()
        assert len(entries) == 10
        assert all(entry.get("name") for entry in entries)

    def test_load_config_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent_file.yaml")
