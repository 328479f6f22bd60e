"""
Performance Instrumentation - Interface to the browser's timing entry streams
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

PerformanceEntry = Dict[str, Any]
EntryCallback = Callable[[List[PerformanceEntry]], None]

LARGEST_CONTENTFUL_PAINT = 'largest-contentful-paint'
FIRST_INPUT = 'first-input'
LAYOUT_SHIFT = 'layout-shift'
PAINT = 'paint'


class Observation(ABC):
    """Handle on one live subscription"""

    @abstractmethod
    async def disconnect(self) -> None:
        """Stop delivering entries to the subscriber"""
        pass


class PerformanceInstrumentation(ABC):
    """Base interface for sources of performance timing entries

    Entries are plain dicts shaped like ``PerformanceEntry.toJSON()``
    (``startTime``, ``renderTime``, ``processingStart``, ``hadRecentInput``...).
    Callbacks are invoked on the event loop that called ``observe``.
    """

    @abstractmethod
    async def is_supported(self) -> bool:
        """Whether any timing hooks are available at all"""
        pass

    @abstractmethod
    async def observe(self, entry_type: str, callback: EntryCallback) -> Observation:
        """Subscribe ``callback`` to the stream of ``entry_type`` entries"""
        pass

    @abstractmethod
    async def navigation_entry(self) -> Optional[PerformanceEntry]:
        """Read the navigation timing entry, None when unavailable"""
        pass
