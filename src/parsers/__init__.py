"""
Parsers module for scraped ESG risk reports.
"""

from .base import BaseParser, ParseResult, DocumentType
from .models import (
    SectionType, RiskItem, RecommendationItem, ThemeEntry, RiskCategory, ReportSection, RawBlock,
)
from .taxonomy import Taxonomy, DEFAULT_TAXONOMY, UNCATEGORIZED
from .title_normalizer import TitleNormalizer, normalize_title
from .report_shape import ReportShape, DEFAULT_SHAPE, parse_document
from .segmenter import SectionSegmenter, slugify
from .risk_extractor import RiskExtractor
from .assembler import SectionAssembler
from .html_report_parser import HTMLReportParser, parse_report_html
from .parser_runner import ParserRunner

__all__ = [
    'BaseParser',
    'ParseResult',
    'DocumentType',
    'SectionType',
    'RiskItem',
    'RecommendationItem',
    'ThemeEntry',
    'RiskCategory',
    'ReportSection',
    'RawBlock',
    'Taxonomy',
    'DEFAULT_TAXONOMY',
    'UNCATEGORIZED',
    'TitleNormalizer',
    'normalize_title',
    'ReportShape',
    'DEFAULT_SHAPE',
    'parse_document',
    'SectionSegmenter',
    'slugify',
    'RiskExtractor',
    'SectionAssembler',
    'HTMLReportParser',
    'parse_report_html',
    'ParserRunner',
]
