"""
API services.
"""

from .report_service import ReportService
from .payment_gate import PaymentGate

__all__ = ['ReportService', 'PaymentGate']
