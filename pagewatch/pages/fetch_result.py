"""
Page Fetch Result - Outcome of loading one page over HTTP
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PageFetchResult:
    """Result of fetching a single URL"""
    url: str
    content: Optional[str] = None
    error: Optional[str] = None
    response_time: float = 0.0
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.content is not None
