"""
Utilities module.
"""

from .config import ReportConfig
from .report_scraper import ReportScraper

__all__ = ['ReportConfig', 'ReportScraper']
