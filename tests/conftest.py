"""Shared test fixtures."""

from pathlib import Path

import pytest

from koshercheck.models import CertificationRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def catalog_page_html():
    """Load the catalog page HTML fixture."""
    return (FIXTURES_DIR / "catalog_page.html").read_text(encoding="utf-8")


@pytest.fixture
def sample_records():
    """Small catalog covering every field."""
    return [
        CertificationRecord(
            id="item_1",
            name="Milk 3%",
            company="Tnuva",
            certification_label="חתם סופר",
            notes="מומלץ על ידי כושרות",
            keywords=("חלב", "טרי"),
            image_url="https://www.kosharot.co.il/images/chatam.png",
        ),
        CertificationRecord(
            id="item_2",
            name="לחם אחיד",
            company="אנגל",
            certification_label="בית יוסף",
        ),
        CertificationRecord(
            id="item_3",
            name="Olive Oil",
            company="-",
            certification_label="רבנות ירושלים",
            notes="כשר לפסח",
        ),
        CertificationRecord(
            id="item_4",
            name="Chocolate milk drink",
            company="Strauss",
            certification_label="KF",
        ),
    ]


@pytest.fixture
def sample_known_companies():
    """Small company list for CompanyMatcher tests."""
    return ["תנובה", "עלית", "פסטה זארה", "זארה", "Osem", "Strauss"]


@pytest.fixture
def sample_patterns():
    """Certification patterns for CertificationLabeler tests (no config I/O)."""
    return [
        {"label": "חתם סופר", "fragments": ["חתם סופר", "chatam"]},
        {"label": "בד\"ץ בית יוסף", "fragments": ["בית יוסף", "beit yosef"]},
        {"city_prefixes": ["רבנות", "Rabbinate"]},
        {"label": "בד\"ץ", "fragments": ["בדץ", "badatz"]},
        {"label": "KF", "fragments": ["kf"]},
        {"label": "OU", "fragments": ["ou"]},
        {"label": "OK", "fragments": ["ok"]},
    ]


@pytest.fixture
def known_names():
    """Known certification name list for matcher tests."""
    return ["חתם סופר", "בית יוסף", "בד\"ץ", "KF", "OU"]
