"""
Browser Page - Live Playwright pages as monitoring targets
"""

import logging
from typing import Dict, List, Optional
from playwright.async_api import async_playwright, Page
from ..analysis import DocumentSnapshot, SoupDocument
from ..vitals import PerformanceInstrumentation, PlaywrightInstrumentation
from .base import PageContext

logger = logging.getLogger(__name__)


class BrowserPageContext(PageContext):
    """A page rendered by a real browser, read through Playwright"""

    def __init__(self, page: Page):
        self.page = page
        self._instrumentation = PlaywrightInstrumentation(page)

    @property
    def url(self) -> str:
        return self.page.url

    @property
    def instrumentation(self) -> PerformanceInstrumentation:
        return self._instrumentation

    async def snapshot_document(self) -> DocumentSnapshot:
        html = await self.page.content()
        return SoupDocument(html, self.page.url)


class BrowserSession:
    """Owns one headless browser and the pages opened in it for monitoring

    Use as ``async with BrowserSession() as session``. Pages opened through
    ``open`` share one browser context and close with the session.
    """

    BROWSER_TYPES = ('chromium', 'firefox', 'webkit')
    LAUNCH_ARGS = ('--no-sandbox', '--disable-dev-shm-usage')
    USER_AGENT = 'Mozilla/5.0 (compatible; PagewatchMonitor/1.0)'

    def __init__(self, browser_type: str = 'chromium', headless: bool = True,
                 viewport: Optional[Dict[str, int]] = None):
        if browser_type not in self.BROWSER_TYPES:
            raise ValueError(f"Unknown browser type: {browser_type}")
        self.browser_type = browser_type
        self.headless = headless
        self.viewport = viewport or {'width': 1366, 'height': 768}
        self.pages: List[BrowserPageContext] = []
        self._driver = None
        self._browser = None
        self._context = None

    @property
    def running(self) -> bool:
        return self._context is not None

    async def __aenter__(self) -> 'BrowserSession':
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def start(self):
        """Launch the browser; a second call on a running session does nothing"""
        if self.running:
            return

        self._driver = await async_playwright().start()
        try:
            # Sandbox flags only apply to chromium
            launcher = getattr(self._driver, self.browser_type)
            args = list(self.LAUNCH_ARGS) if self.browser_type == 'chromium' else []
            self._browser = await launcher.launch(headless=self.headless, args=args)
            self._context = await self._browser.new_context(
                viewport=self.viewport, user_agent=self.USER_AGENT
            )
        except Exception as e:
            logger.error(f"Failed to start {self.browser_type}: {e}")
            await self.close()
            raise

        logger.info(f"Started {'headless ' if self.headless else ''}{self.browser_type}")

    async def close(self):
        """Release context, browser and driver, newest first"""
        handles = (
            ('context', self._context, 'close'),
            ('browser', self._browser, 'close'),
            ('driver', self._driver, 'stop'),
        )
        self._context = self._browser = self._driver = None
        self.pages.clear()

        for label, handle, method in handles:
            if handle is None:
                continue
            try:
                await getattr(handle, method)()
            except Exception as e:
                logger.warning(f"Error closing browser {label}: {e}")

    async def open(self, url: str, wait_until: str = 'load', timeout: float = 30.0) -> BrowserPageContext:
        """Navigate a new page to ``url`` and wrap it for monitoring"""
        if not self.running:
            raise RuntimeError("Browser session not started. Use 'async with' or call start() first")

        page = await self._context.new_page()
        try:
            await page.goto(url, wait_until=wait_until, timeout=timeout * 1000)
        except Exception:
            await page.close()
            raise

        logger.info(f"Opened {url} in {self.browser_type}")
        context = BrowserPageContext(page)
        self.pages.append(context)
        return context
