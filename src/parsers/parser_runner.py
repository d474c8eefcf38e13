"""
Parser runner that supports local files and scraped results pages.
"""

from pathlib import Path
from typing import Optional, Dict, Any
import logging
import json

from .html_report_parser import HTMLReportParser
from ..utils.report_scraper import ReportScraper

logger = logging.getLogger(__name__)


class ParserRunner:
    """
    Orchestrates parsing of saved or freshly scraped reports.

    Workflow:
        1. Read input (local HTML file or scraped page)
        2. Parse with HTMLReportParser
        3. Save JSON output locally
    """

    def __init__(
        self,
        parser: Optional[HTMLReportParser] = None,
        scraper: Optional[ReportScraper] = None,
        local_output_dir: Optional[Path] = None
    ):
        """
        Initialize parser runner.

        Args:
            parser: Report parser (default: HTMLReportParser())
            scraper: Scraper for remote results pages (optional)
            local_output_dir: Directory for JSON output (default: output/)
        """
        self.parser = parser or HTMLReportParser()
        self.scraper = scraper
        self.local_output_dir = local_output_dir or Path("output")
        self.local_output_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"[INFO] ParserRunner initialized")
        logger.info(f"[INFO] Scrape mode: {'enabled' if self.scraper else 'disabled'}")
        logger.info(f"[INFO] Local output: {self.local_output_dir}")

    def save_json(self, data: Dict[str, Any], output_name: str) -> Path:
        """Write a payload to the output directory."""
        output_path = self.local_output_dir / f"{output_name}.json"
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(f"[OK] Saved to: {output_path}")
        return output_path

    def parse_local_file(self, file_path: Path) -> Optional[Dict[str, Any]]:
        """
        Parse a saved results page and write its JSON.

        Args:
            file_path: Path to local HTML file

        Returns:
            Parsed payload or None if failed
        """
        logger.info(f"[INFO] Parsing local file: {file_path}")

        if not self.parser.can_parse(file_path):
            logger.error(f"[ERROR] Not an HTML report: {file_path.name}")
            return None

        result = self.parser.parse(file_path)
        if not result.success:
            logger.error(f"[ERROR] Parse failed: {result.error}")
            return None

        if result.section_count == 0:
            logger.warning(f"[WARN] No report sections found in {file_path.name}")
        if not self.parser.validate_output(result.data):
            logger.warning(f"[WARN] Payload for {file_path.name} failed validation")

        self.save_json(result.data, file_path.stem)
        return result.data

    def parse_html_string(self, html: str, output_name: str, save: bool = True) -> Dict[str, Any]:
        """
        Parse an in-memory results page.

        Args:
            html: Raw HTML
            output_name: Base name for the JSON file
            save: Whether to write the JSON file

        Returns:
            Parsed payload (sections may be empty)
        """
        sections = self.parser.parse_html(html)
        data = self.parser.build_payload(sections, source_file=output_name)
        if save:
            self.save_json(data, output_name)
        return data

    def parse_scraped_report(self, industry_id: int, country_id: int) -> Optional[Dict[str, Any]]:
        """
        Scrape and parse the results page for an industry/country pair.

        Args:
            industry_id: Industry id of the source site
            country_id: Country id of the source site

        Returns:
            Parsed payload or None if the scrape failed
        """
        if not self.scraper:
            logger.error("[ERROR] Scraper not configured")
            return None

        html = self.scraper.fetch_report(industry_id, country_id)
        if html is None:
            return None

        data = self.parse_html_string(html, f"report-{industry_id}-{country_id}")
        if not data["sections"]:
            logger.warning(f"[WARN] Scraped page for {industry_id}/{country_id} produced no sections")
        return data

    def batch_parse_local(self, input_dir: Path, file_pattern: str = "*.html") -> Dict[str, Any]:
        """
        Parse all results pages in a local directory.

        Args:
            input_dir: Directory containing files to parse
            file_pattern: Glob pattern for files

        Returns:
            Dictionary with statistics and results
        """
        logger.info(f"[INFO] Batch parsing local directory: {input_dir}")

        files = [f for f in input_dir.rglob(file_pattern) if f.is_file()]
        logger.info(f"[INFO] Found {len(files)} files matching pattern '{file_pattern}'")

        results = {
            "total_files": len(files),
            "successful": 0,
            "failed": 0,
            "files": []
        }

        for file_path in files:
            try:
                data = self.parse_local_file(file_path)

                if data:
                    results["successful"] += 1
                    results["files"].append({
                        "file": file_path.name,
                        "status": "success",
                        "sections": data["metadata"]["total_sections"]
                    })
                else:
                    results["failed"] += 1
                    results["files"].append({
                        "file": file_path.name,
                        "status": "failed"
                    })

            except Exception as e:
                logger.error(f"[ERROR] Error processing {file_path.name}: {e}")
                results["failed"] += 1
                results["files"].append({
                    "file": file_path.name,
                    "status": "error",
                    "error": str(e)
                })

        logger.info(f"[OK] Batch complete: {results['successful']}/{results['total_files']} successful")
        return results
