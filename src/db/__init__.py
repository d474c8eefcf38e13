"""
Embedded report database access.
"""

from .report_store import ReportStore, ApplicabilityIds
from .report_builder import StoreReportBuilder

__all__ = ['ReportStore', 'ApplicabilityIds', 'StoreReportBuilder']
