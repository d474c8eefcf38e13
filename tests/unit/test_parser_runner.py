"""
Unit tests for ParserRunner.
"""

import json
import pytest
from unittest.mock import MagicMock
from src.parsers.parser_runner import ParserRunner


@pytest.fixture
def runner(tmp_path):
    """Runner writing into a temporary directory."""
    return ParserRunner(local_output_dir=tmp_path / "output")


class TestParserRunner:
    """Test suite for local and scraped parsing runs."""

    def test_parse_local_file(self, runner, tmp_path, sample_report_html):
        file_path = tmp_path / "china-textiles.html"
        file_path.write_text(sample_report_html, encoding='utf-8')

        data = runner.parse_local_file(file_path)

        assert data["metadata"]["total_sections"] == 5
        saved = json.loads((runner.local_output_dir / "china-textiles.json").read_text(encoding='utf-8'))
        assert [s["id"] for s in saved["sections"]] == [s["id"] for s in data["sections"]]

    def test_rejects_non_html(self, runner, tmp_path):
        file_path = tmp_path / "notes.txt"
        file_path.write_text("hello")
        assert runner.parse_local_file(file_path) is None

    def test_parse_html_string_no_save(self, runner, sample_report_html):
        data = runner.parse_html_string(sample_report_html, "inline", save=False)
        assert data["metadata"]["risk_sections"] == 1
        assert not (runner.local_output_dir / "inline.json").exists()

    def test_scrape_without_scraper(self, runner):
        assert runner.parse_scraped_report(1, 2) is None

    def test_scraped_report(self, tmp_path, sample_report_html):
        scraper = MagicMock()
        scraper.fetch_report.return_value = sample_report_html
        runner = ParserRunner(scraper=scraper, local_output_dir=tmp_path)

        data = runner.parse_scraped_report(7, 42)

        scraper.fetch_report.assert_called_once_with(7, 42)
        assert data["source_file"] == "report-7-42"
        assert (tmp_path / "report-7-42.json").exists()

    def test_scrape_failure(self, tmp_path):
        scraper = MagicMock()
        scraper.fetch_report.return_value = None
        runner = ParserRunner(scraper=scraper, local_output_dir=tmp_path)
        assert runner.parse_scraped_report(7, 42) is None

    def test_batch_parse_local(self, runner, tmp_path, sample_report_html):
        input_dir = tmp_path / "pages"
        (input_dir / "nested").mkdir(parents=True)
        (input_dir / "a.html").write_text(sample_report_html, encoding='utf-8')
        (input_dir / "nested" / "b.html").write_text("<p>no results</p>", encoding='utf-8')

        results = runner.batch_parse_local(input_dir)

        assert results["total_files"] == 2
        assert results["successful"] == 2
        assert results["failed"] == 0
