"""
On-page SEO signal analysis
"""

from .document import DocumentSnapshot
from .soup_document import SoupDocument
from .signal_analyzer import PageSignalAnalyzer

__all__ = [
    'DocumentSnapshot',
    'SoupDocument',
    'PageSignalAnalyzer'
]
