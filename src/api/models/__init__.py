"""
API models.
"""

from .report import ParseHtmlRequest, ReportResponse

__all__ = ['ParseHtmlRequest', 'ReportResponse']
