"""
Company Matcher

Derives the manufacturer of a catalog product by looking for known
company/brand names inside the product title.

The known companies list is loaded from config/known_companies.yaml.
"""

from typing import List, Optional

from ..common.config_loader import get_companies_lowercase_map, load_known_companies
from ..models import UNKNOWN_COMPANY


class CompanyMatcher:
    """
    Matches product titles to known company names.

    Usage:
        matcher = CompanyMatcher()
        company = matcher.match("שוקולד חלב שטראוס 100 גרם")
        # Returns: "שטראוס"
    """

    def __init__(self, companies: Optional[List[str]] = None):
        """
        Initialize the company matcher.

        Args:
            companies: Optional list of known companies. If None, loads from config.
        """
        if companies is None:
            self.known_companies = load_known_companies()
        else:
            self.known_companies = list(companies)

        self.companies_lower = get_companies_lowercase_map(self.known_companies)

        # Longest names first so "פסטה זארה" wins over a shorter overlap
        self._search_order = sorted(self.companies_lower, key=len, reverse=True)

    def match(self, title: str) -> str:
        """
        Find the company named in a product title.

        Args:
            title: Product title

        Returns:
            Canonical company name, or UNKNOWN_COMPANY if none matched
        """
        if not title:
            return UNKNOWN_COMPANY

        title_lower = title.lower()
        for candidate in self._search_order:
            if candidate and candidate in title_lower:
                return self.companies_lower[candidate]

        return UNKNOWN_COMPANY

    def is_known_company(self, company: str) -> bool:
        """Check if a company name is in the known list (case-insensitive)."""
        return company.lower() in self.companies_lower

    def get_canonical_name(self, company: str) -> str:
        """
        Get the canonical spelling of a company name.

        Example:
            >>> matcher.get_canonical_name("osem")
            'Osem'
        """
        return self.companies_lower.get(company.lower(), company)

    @property
    def company_count(self) -> int:
        """Return the number of known companies."""
        return len(self.known_companies)
