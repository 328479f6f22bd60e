from ..analysis import DocumentSnapshot, SoupDocument
from ..vitals import NullInstrumentation, PerformanceInstrumentation
from .base import PageContext
from .fetch_result import PageFetchResult


class StaticPageContext(PageContext):
    """A page known only by its HTML; no timing hooks, so vitals read as zero"""

    def __init__(self, url: str, html: str):
        self._url = url
        self.html = html
        self._instrumentation = NullInstrumentation()
        self._document = None

    @classmethod
    def from_fetch_result(cls, result: PageFetchResult) -> 'StaticPageContext':
        return cls(result.url, result.content or '')

    @property
    def url(self) -> str:
        return self._url

    @property
    def instrumentation(self) -> PerformanceInstrumentation:
        return self._instrumentation

    async def snapshot_document(self) -> DocumentSnapshot:
        # The HTML never changes, so one parse serves every collection
        if self._document is None:
            self._document = SoupDocument(self.html, self._url)
        return self._document
