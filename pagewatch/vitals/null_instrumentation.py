from typing import Optional
from .instrumentation import (
    EntryCallback, Observation, PerformanceEntry, PerformanceInstrumentation
)


class _NullObservation(Observation):
    async def disconnect(self) -> None:
        pass


class NullInstrumentation(PerformanceInstrumentation):
    """Instrumentation for runtimes without any timing hooks"""

    async def is_supported(self) -> bool:
        return False

    async def observe(self, entry_type: str, callback: EntryCallback) -> Observation:
        return _NullObservation()

    async def navigation_entry(self) -> Optional[PerformanceEntry]:
        return None
