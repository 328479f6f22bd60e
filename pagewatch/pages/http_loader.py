"""
Page Loader - Fetches a page's HTML with aiohttp
"""

import time
import asyncio
import logging
import aiohttp
from typing import Optional
from .fetch_result import PageFetchResult

logger = logging.getLogger(__name__)


class PageLoader:
    """Loads pages over HTTP for static analysis"""

    def __init__(self, user_agent: str = 'PagewatchMonitor/1.0', timeout: float = 30.0):
        self.user_agent = user_agent
        self.timeout = timeout

    async def fetch(self, url: str, session: Optional[aiohttp.ClientSession] = None) -> PageFetchResult:
        """Fetch a single URL; failures are reported on the result, not raised"""
        if session is None:
            async with aiohttp.ClientSession() as own_session:
                return await self._fetch(own_session, url)
        return await self._fetch(session, url)

    async def _fetch(self, session: aiohttp.ClientSession, url: str) -> PageFetchResult:
        start_time = time.time()

        try:
            headers = {'User-Agent': self.user_agent}
            timeout = aiohttp.ClientTimeout(total=self.timeout)

            async with session.get(url, headers=headers, timeout=timeout) as response:
                response_time = time.time() - start_time

                if response.status == 200:
                    content = await response.text()
                    logger.info(f"Fetched {url} in {response_time:.2f}s")
                    return PageFetchResult(
                        url=str(response.url),
                        content=content,
                        response_time=response_time,
                        status_code=response.status
                    )

                logger.warning(f"Fetching {url} returned HTTP {response.status}")
                return PageFetchResult(
                    url=url,
                    error=f"HTTP {response.status}",
                    response_time=response_time,
                    status_code=response.status
                )

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            response_time = time.time() - start_time
            logger.warning(f"Failed to fetch {url}: {e}")
            return PageFetchResult(
                url=url,
                error=str(e) or e.__class__.__name__,
                response_time=response_time
            )
