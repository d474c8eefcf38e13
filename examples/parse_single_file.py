#!/usr/bin/env python
"""
Example: Parse a single results page (saved or scraped) and walk the model.
"""

import sys
from pathlib import Path
import logging
from dotenv import load_dotenv

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.parsers import parse_report_html, SectionType
from src.parsers.parser_runner import ParserRunner
from src.utils.config import ReportConfig
from src.utils.report_scraper import ReportScraper

# Load environment
load_dotenv()

# Configure logging
logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')


def example_parse_local():
    """Example: Parse a saved page and print its risk tree."""
    print("\n" + "="*60)
    print("EXAMPLE 1: Parse Saved Results Page")
    print("="*60)

    file_path = Path("data/textiles-china.html")

    if not file_path.exists():
        print(f"[SKIP] File not found: {file_path}")
        return

    sections = parse_report_html(file_path.read_text(encoding='utf-8'))

    for section in sections:
        print(f"\n[{section.type.value}] {section.title}")
        if section.type != SectionType.RISK:
            continue
        for category in section.categories:
            print(f"  {category.category_title}")
            for theme in category.themes:
                print(f"    - {theme.theme_name}: {theme.risk_count} risks, "
                      f"{theme.recommendation_count} recommendations")


def example_parse_scraped():
    """Example: Scrape a results page and save its JSON."""
    print("\n" + "="*60)
    print("EXAMPLE 2: Scrape and Parse")
    print("="*60)

    config = ReportConfig.from_env()
    runner = ParserRunner(
        scraper=ReportScraper(config.source_url_template, config.request_timeout),
        local_output_dir=Path(config.output_dir)
    )

    data = runner.parse_scraped_report(industry_id=12, country_id=45)

    if data:
        print(f"\n[OK] Parsed {data['metadata']['total_sections']} sections")
        print(f"Output saved to: {config.output_dir}/report-12-45.json")
    else:
        print("[SKIP] Results page could not be fetched")


def main():
    """Run all examples."""
    example_parse_local()
    example_parse_scraped()


if __name__ == '__main__':
    main()
