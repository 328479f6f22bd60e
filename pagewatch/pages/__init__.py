"""
Page contexts: where instrumentation and documents come from
"""

from .base import PageContext
from .fetch_result import PageFetchResult
from .static_page import StaticPageContext
from .browser_page import BrowserPageContext, BrowserSession
from .http_loader import PageLoader

__all__ = [
    'PageContext',
    'PageFetchResult',
    'StaticPageContext',
    'BrowserPageContext',
    'BrowserSession',
    'PageLoader'
]
