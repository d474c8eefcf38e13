"""
HTML Report Parser for scraped ESG risk results pages.
"""

from pathlib import Path
from typing import Dict, Any, List, Optional
import time
from datetime import datetime

from .assembler import SectionAssembler
from .base import BaseParser, ParseResult, DocumentType
from .models import ReportSection, sections_to_dicts
from .report_shape import ReportShape, DEFAULT_SHAPE, DEFAULT_BACKEND, parse_document
from .risk_extractor import RiskExtractor
from .segmenter import SectionSegmenter
from .taxonomy import Taxonomy
from .title_normalizer import TitleNormalizer


class HTMLReportParser(BaseParser):
    """
    Parser for scraped ESG risk results pages.

    Pipeline: raw HTML -> DOM -> SectionSegmenter -> SectionAssembler
    (RiskExtractor for the risk-analysis block) -> ReportSection list.

    The taxonomy, title table and expected markup shape are injected so
    tests and future page versions can swap them.
    """

    def __init__(
        self,
        taxonomy: Optional[Taxonomy] = None,
        title_normalizer: Optional[TitleNormalizer] = None,
        shape: ReportShape = DEFAULT_SHAPE,
        backend: str = DEFAULT_BACKEND,
        parser_version: str = "1.0.0"
    ):
        super().__init__(parser_version)
        self.shape = shape
        self.backend = backend
        self.segmenter = SectionSegmenter(shape=shape, title_normalizer=title_normalizer)
        self.assembler = SectionAssembler(RiskExtractor(taxonomy=taxonomy, shape=shape))

    def can_parse(self, file_path: Path) -> bool:
        """Check if file is an HTML page."""
        return file_path.suffix.lower() in ['.html', '.htm']

    def get_document_type(self) -> DocumentType:
        return DocumentType.HTML_REPORT

    def parse_html(self, html: str) -> List[ReportSection]:
        """
        Parse a scraped results page into report sections.

        Never raises: unexpected failures are logged and give an empty list.

        Args:
            html: Raw HTML string

        Returns:
            Sections in document order
        """
        if not html or not isinstance(html, str):
            return []

        try:
            document = parse_document(html, self.backend)
            blocks = self.segmenter.segment(document)
            return self.assembler.assemble(blocks)
        except Exception as e:
            self.logger.error(f"[ERROR] Failed to parse report HTML: {e}", exc_info=True)
            return []

    def parse(self, file_path: Path) -> ParseResult:
        """
        Parse a saved results page.

        Args:
            file_path: Path to HTML file

        Returns:
            ParseResult with serialized sections
        """
        try:
            self.logger.info(f"[INFO] Parsing report: {file_path.name}")
            start_time = time.time()

            with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
                content = f.read()

            sections = self.parse_html(content)
            data = self.build_payload(sections, source_file=file_path.name)
            data["metadata"]["parse_duration_seconds"] = time.time() - start_time

            duration = time.time() - start_time
            self.logger.info(f"[OK] Parsed {len(sections)} sections in {duration:.2f}s")

            return ParseResult(
                success=True,
                document_type=DocumentType.HTML_REPORT,
                data=data,
                metadata={"duration": duration}
            )

        except Exception as e:
            self.logger.error(f"[ERROR] Failed to parse report: {e}", exc_info=True)
            return ParseResult(
                success=False,
                document_type=DocumentType.HTML_REPORT,
                error=str(e)
            )

    def build_payload(self, sections: List[ReportSection], source_file: str = "") -> Dict[str, Any]:
        """JSON payload for a parsed report."""
        return {
            "document_type": DocumentType.HTML_REPORT.value,
            "source_file": source_file,
            "sections": sections_to_dicts(sections),
            "metadata": {
                "parsed_at": datetime.now().isoformat(),
                "parser_version": self.parser_version,
                "shape_version": self.shape.version,
                "total_sections": len(sections),
                "risk_sections": sum(1 for s in sections if s.is_risk),
            }
        }

    def validate_output(self, data: Dict[str, Any]) -> bool:
        """Check the count and payload invariants of a serialized report."""
        if not super().validate_output(data):
            return False
        for section in data["sections"]:
            if section.get("type") == "risk":
                if "categories" not in section or "html" in section:
                    return False
                for category in section["categories"]:
                    for theme in category["themes"]:
                        if theme["riskCount"] != len(theme["risks"]):
                            return False
                        if theme["recommendationCount"] != len(theme["recommendations"]):
                            return False
            elif "html" not in section or "categories" in section:
                return False
        return True


def parse_report_html(
    html: str,
    taxonomy: Optional[Taxonomy] = None,
    title_normalizer: Optional[TitleNormalizer] = None,
    shape: ReportShape = DEFAULT_SHAPE,
    backend: str = DEFAULT_BACKEND
) -> List[ReportSection]:
    """Parse a scraped results page with a one-off parser."""
    parser = HTMLReportParser(
        taxonomy=taxonomy,
        title_normalizer=title_normalizer,
        shape=shape,
        backend=backend
    )
    return parser.parse_html(html)
