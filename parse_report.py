#!/usr/bin/env python
"""
Report parsing script - saved pages, scraped pages or the embedded database.

Usage:
    # Parse a saved results page
    python parse_report.py --html data/textiles-china.html

    # Parse every saved results page in a directory
    python parse_report.py --input data/ --pattern "*.html"

    # Scrape and parse a results page
    python parse_report.py --industry-id 12 --country-id 45

    # Build a report from the embedded database
    python parse_report.py --country China --industry Textiles
"""

import argparse
import logging
from pathlib import Path
import json
from dotenv import load_dotenv

from src.db.report_builder import StoreReportBuilder
from src.db.report_store import ReportStore
from src.parsers.base import DocumentType
from src.parsers.html_report_parser import HTMLReportParser
from src.parsers.models import sections_to_dicts
from src.parsers.parser_runner import ParserRunner
from src.utils.config import ReportConfig
from src.utils.report_scraper import ReportScraper

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)


def print_summary(data):
    """Print a short overview of a parsed report."""
    print("\n" + "="*60)
    print("REPORT SUMMARY")
    print("="*60)
    for section in data["sections"]:
        if section["type"] == "risk":
            themes = sum(len(c["themes"]) for c in section["categories"])
            print(f"[risk] {section['id']}: {len(section['categories'])} categories, {themes} themes")
        else:
            print(f"[text] {section['id']}: {len(section['html'])} characters")


def run_database(args, config, runner):
    """Build a report from the embedded database."""
    database_path = Path(args.database or config.database_path)
    if not database_path.exists():
        logger.error(f"[ERROR] Database not found: {database_path}")
        return None

    with ReportStore(database_path) as store:
        sections = StoreReportBuilder(store).build_sections(args.country, args.industry)

    data = {
        "document_type": DocumentType.DATABASE_REPORT.value,
        "country": args.country,
        "industry": args.industry,
        "sections": sections_to_dicts(sections),
    }
    runner.save_json(data, f"report-{args.country}-{args.industry}".lower().replace(' ', '-'))
    return data


def main():
    parser = argparse.ArgumentParser(
        description='Parse ESG risk reports',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    # Source selection
    parser.add_argument('--html', type=str, help='Saved results page to parse')
    parser.add_argument('--input', type=str, help='Directory of saved results pages')
    parser.add_argument('--pattern', type=str, default='*.html',
                       help='File pattern for --input (default: *.html)')
    parser.add_argument('--industry-id', type=int, help='Industry id to scrape')
    parser.add_argument('--country-id', type=int, help='Country id to scrape')
    parser.add_argument('--country', type=str, help='Country name (database mode)')
    parser.add_argument('--industry', type=str, help='Industry name (database mode)')
    parser.add_argument('--database', type=str, help='SQLite database path (default: from config)')

    # Output options
    parser.add_argument('--output', type=str, default=None,
                       help='Output directory (default: REPORT_OUTPUT_DIR or output/)')

    args = parser.parse_args()

    scrape_mode = args.industry_id is not None or args.country_id is not None
    database_mode = bool(args.country or args.industry)
    modes = sum([bool(args.html), bool(args.input), scrape_mode, database_mode])
    if modes != 1:
        parser.error("choose exactly one of --html, --input, --industry-id/--country-id, --country/--industry")
    if scrape_mode and (args.industry_id is None or args.country_id is None):
        parser.error("scraping requires both --industry-id and --country-id")
    if database_mode and not (args.country and args.industry):
        parser.error("database mode requires both --country and --industry")

    config = ReportConfig.from_env()
    runner = ParserRunner(
        parser=HTMLReportParser(backend=config.parser_backend),
        scraper=ReportScraper(config.source_url_template, config.request_timeout) if scrape_mode else None,
        local_output_dir=Path(args.output or config.output_dir)
    )

    try:
        if args.input:
            results = runner.batch_parse_local(Path(args.input), file_pattern=args.pattern)
            print(json.dumps(results, indent=2))
            return

        if args.html:
            data = runner.parse_local_file(Path(args.html))
        elif scrape_mode:
            data = runner.parse_scraped_report(args.industry_id, args.country_id)
        else:
            data = run_database(args, config, runner)

        if not data:
            logger.error("[ERROR] Failed to load report data")
            return
        print_summary(data)

    except KeyboardInterrupt:
        logger.info("\n[INFO] Interrupted by user")
    except Exception as e:
        logger.error(f"[ERROR] Fatal error: {e}", exc_info=True)


if __name__ == '__main__':
    main()
