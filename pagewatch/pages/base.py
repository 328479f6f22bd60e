"""
Page Context - The page a monitor measures and analyzes
"""

from abc import ABC, abstractmethod
from ..analysis import DocumentSnapshot
from ..vitals import PerformanceInstrumentation


class PageContext(ABC):
    """Base interface for a monitored page

    Supplies the timing instrumentation and the current rendered document.
    """

    @property
    @abstractmethod
    def url(self) -> str:
        """URL of the page as currently displayed"""
        pass

    @property
    @abstractmethod
    def instrumentation(self) -> PerformanceInstrumentation:
        pass

    @abstractmethod
    async def snapshot_document(self) -> DocumentSnapshot:
        """Read-only snapshot of the document as currently rendered"""
        pass
