"""
HTTP client for the external risk results page.
"""

import logging
from typing import Dict, Optional

import requests

from .config import DEFAULT_SOURCE_URL

logger = logging.getLogger(__name__)

BROWSER_HEADERS: Dict[str, str] = {
    'User-Agent': (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
    ),
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.9',
    'Cache-Control': 'no-cache',
    'Pragma': 'no-cache',
}


class ReportScraper:
    """
    Fetches the externally rendered results page for an industry/country pair.

    Failures are logged and reported as None; the caller decides what to
    show the user.
    """

    def __init__(
        self,
        url_template: str = DEFAULT_SOURCE_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize scraper.

        Args:
            url_template: Results URL with {industry_id} and {country_id} fields
            timeout: Request timeout in seconds
            session: Optional requests session (default: new session)
        """
        self.url_template = url_template
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(BROWSER_HEADERS)

    def build_url(self, industry_id: int, country_id: int) -> str:
        return self.url_template.format(industry_id=industry_id, country_id=country_id)

    def fetch(self, url: str) -> Optional[str]:
        """
        Fetch a page.

        Args:
            url: Page URL

        Returns:
            HTML text or None on failure
        """
        logger.info(f"[INFO] Fetching report page: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"[ERROR] Failed to fetch report page: {e}")
            return None

        logger.info(f"[OK] Fetched {len(response.text)} characters")
        return response.text

    def fetch_report(self, industry_id: int, country_id: int) -> Optional[str]:
        """Fetch the results page for an industry/country pair."""
        return self.fetch(self.build_url(industry_id, country_id))
