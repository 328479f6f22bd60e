"""
Performance reports over collected history
"""

from .report_generator import ReportGenerator
from .report_printer import ReportPrinter

__all__ = [
    'ReportGenerator',
    'ReportPrinter'
]
