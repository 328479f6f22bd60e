"""
Vitals Collector - Aggregates Core Web Vitals from asynchronous timing streams
"""

import logging
from typing import Dict, List, Optional
from ..models import CoreWebVitalsSample
from ..utils import CountdownLatch
from .instrumentation import (
    EntryCallback, Observation, PerformanceEntry, PerformanceInstrumentation,
    LARGEST_CONTENTFUL_PAINT, FIRST_INPUT, LAYOUT_SHIFT, PAINT
)

logger = logging.getLogger(__name__)

FIRST_CONTENTFUL_PAINT = 'first-contentful-paint'


def _first_number(entry: PerformanceEntry, *keys: str) -> float:
    """First truthy numeric value among ``keys``, 0.0 if none"""
    for key in keys:
        value = entry.get(key)
        if value:
            return float(value)
    return 0.0


class _Measurement:
    """State of one ``measure()`` call"""

    def __init__(self, collector: 'VitalsCollector'):
        self.collector = collector
        self.lcp: Optional[float] = None
        self.fid: Optional[float] = None
        self.fcp: Optional[float] = None
        self.reported = set()
        self.latch = CountdownLatch(len(VitalsCollector.STREAMS))

    def handlers(self) -> Dict[str, EntryCallback]:
        return {
            LARGEST_CONTENTFUL_PAINT: self.on_largest_paint,
            FIRST_INPUT: self.on_first_input,
            LAYOUT_SHIFT: self.on_layout_shift,
            PAINT: self.on_paint,
        }

    def signal(self, entry_type: str):
        if entry_type not in self.reported:
            self.reported.add(entry_type)
            self.latch.count_down()

    def on_largest_paint(self, entries: List[PerformanceEntry]):
        if not entries:
            return
        # Later candidates replace earlier ones
        last = entries[-1]
        self.lcp = _first_number(last, 'renderTime', 'loadTime', 'startTime')
        self.signal(LARGEST_CONTENTFUL_PAINT)

    def on_first_input(self, entries: List[PerformanceEntry]):
        if self.fid is not None:
            return
        for entry in entries:
            if 'processingStart' in entry and 'startTime' in entry:
                self.fid = float(entry['processingStart']) - float(entry['startTime'])
                self.signal(FIRST_INPUT)
                return

    def on_layout_shift(self, entries: List[PerformanceEntry]):
        for entry in entries:
            if not entry.get('hadRecentInput', False):
                self.collector.add_layout_shift(entry)
        self.signal(LAYOUT_SHIFT)

    def on_paint(self, entries: List[PerformanceEntry]):
        for entry in entries:
            if entry.get('name') == FIRST_CONTENTFUL_PAINT:
                self.fcp = _first_number(entry, 'startTime')
                self.signal(PAINT)
                return


class VitalsCollector:
    """Measures LCP, FID, CLS, FCP and TTFB from a performance instrumentation

    A measurement resolves once every stream has reported at least once, or
    when ``timeout`` seconds have elapsed, whichever comes first. Metrics that
    never reported are 0. CLS keeps accumulating across measurements made by
    the same collector.

    Buffered observers replay shifts that earlier measurements already saw,
    so each shift is counted once, keyed by its start time and value.
    """

    STREAMS = (LARGEST_CONTENTFUL_PAINT, FIRST_INPUT, LAYOUT_SHIFT, PAINT)

    def __init__(self, instrumentation: PerformanceInstrumentation, timeout: float = 1.0):
        self.instrumentation = instrumentation
        self.timeout = timeout
        self.cls_total = 0.0
        self._counted_shifts = set()

    def add_layout_shift(self, entry: PerformanceEntry) -> bool:
        """Add a shift to the running CLS unless it was already counted"""
        key = (entry.get('startTime'), entry.get('value'))
        if key in self._counted_shifts:
            return False
        self._counted_shifts.add(key)
        self.cls_total += float(entry.get('value') or 0.0)
        return True

    async def measure(self) -> CoreWebVitalsSample:
        """Take one measurement; never raises"""
        if not await self._supported():
            logger.debug("Performance instrumentation unavailable, reporting zero vitals")
            return CoreWebVitalsSample.zero()

        measurement = _Measurement(self)
        observations: List[Observation] = []

        try:
            for entry_type, handler in measurement.handlers().items():
                try:
                    observations.append(await self.instrumentation.observe(entry_type, handler))
                except Exception as e:
                    logger.warning(f"Failed to observe {entry_type} entries: {e}")

            ttfb = await self._read_ttfb()

            released = await measurement.latch.wait(self.timeout)
            if not released:
                missing = [s for s in self.STREAMS if s not in measurement.reported]
                logger.debug(f"Measurement bound reached, unreported streams: {missing}")
        finally:
            for observation in observations:
                try:
                    await observation.disconnect()
                except Exception as e:
                    logger.warning(f"Failed to disconnect observer: {e}")

        return CoreWebVitalsSample(
            lcp=max(0.0, measurement.lcp or 0.0),
            fid=max(0.0, measurement.fid or 0.0),
            cls=max(0.0, self.cls_total),
            fcp=max(0.0, measurement.fcp or 0.0),
            ttfb=max(0.0, ttfb)
        )

    async def _supported(self) -> bool:
        try:
            return await self.instrumentation.is_supported()
        except Exception as e:
            logger.warning(f"Failed to check performance instrumentation: {e}")
            return False

    async def _read_ttfb(self) -> float:
        try:
            navigation = await self.instrumentation.navigation_entry()
        except Exception as e:
            logger.warning(f"Failed to read navigation timing: {e}")
            return 0.0

        if not navigation:
            return 0.0
        return (float(navigation.get('responseStart') or 0.0)
                - float(navigation.get('requestStart') or 0.0))
