"""
Report service.

Wraps the HTML parser, the scraper and the embedded store behind one
interface. Every path ends in a list of ReportSection.
"""

import logging
from pathlib import Path
from typing import List, Optional

from src.db.report_builder import StoreReportBuilder
from src.db.report_store import ReportStore
from src.parsers.html_report_parser import HTMLReportParser
from src.parsers.models import ReportSection
from src.utils.config import ReportConfig
from src.utils.report_scraper import ReportScraper
from .payment_gate import PaymentGate

logger = logging.getLogger(__name__)


class ReportService:
    """
    Service for loading ESG risk reports.

    Integrates:
    - HTMLReportParser for scraped results pages
    - ReportScraper for fetching them
    - ReportStore for the database-backed path
    - PaymentGate for unlock checks
    """

    def __init__(
        self,
        config: Optional[ReportConfig] = None,
        parser: Optional[HTMLReportParser] = None,
        scraper: Optional[ReportScraper] = None,
        store: Optional[ReportStore] = None,
        gate: Optional[PaymentGate] = None
    ):
        """
        Initialize report service.

        Args:
            config: ReportConfig (default: from environment)
            parser: HTMLReportParser instance
            scraper: ReportScraper instance
            store: ReportStore instance (default: opened from config when the file exists)
            gate: PaymentGate instance
        """
        self.config = config or ReportConfig.from_env()
        self.parser = parser or HTMLReportParser(backend=self.config.parser_backend)
        self.scraper = scraper or ReportScraper(
            url_template=self.config.source_url_template,
            timeout=self.config.request_timeout
        )
        self.store = store
        if self.store is None and Path(self.config.database_path).exists():
            self.store = ReportStore(self.config.database_path)
        self.gate = gate or PaymentGate(self.config.invite_codes)

        logger.info("[OK] ReportService initialized")

    def is_unlocked(self, invite_code: Optional[str]) -> bool:
        return self.gate.is_unlocked(invite_code)

    def parse_html(self, html: str) -> List[ReportSection]:
        """Parse a results page supplied by the caller."""
        return self.parser.parse_html(html)

    def load_scraped_report(self, industry_id: int, country_id: int) -> Optional[List[ReportSection]]:
        """
        Scrape and parse the results page for an industry/country pair.

        Returns:
            Sections, or None when the page could not be fetched
        """
        logger.info(f"[INFO] Loading scraped report (industry={industry_id}, country={country_id})")
        html = self.scraper.fetch_report(industry_id, country_id)
        if html is None:
            return None
        return self.parser.parse_html(html)

    def load_local_report(self, country: str, industry: str) -> Optional[List[ReportSection]]:
        """
        Build a report from the embedded store.

        Returns:
            Sections ([] when the pair is unknown), or None when no database is configured
        """
        if self.store is None:
            logger.error("[ERROR] Report database not available")
            return None

        ids = self.store.resolve(country, industry)
        if ids.is_empty():
            return []
        return StoreReportBuilder(self.store).build_sections(country, industry, ids=ids)
