"""
Playwright Instrumentation - PerformanceObserver streams of a live browser page
"""

import itertools
import logging
from typing import Dict, Optional
from playwright.async_api import Page, Error as PlaywrightError
from .instrumentation import (
    EntryCallback, Observation, PerformanceEntry, PerformanceInstrumentation
)

logger = logging.getLogger(__name__)

_SUPPORT_SCRIPT = "() => typeof PerformanceObserver !== 'undefined'"

_OBSERVE_SCRIPT = """
([binding, observerId, entryType]) => {
    const registry = window.__pagewatchObservers = window.__pagewatchObservers || {};
    const observer = new PerformanceObserver((list) => {
        window[binding](observerId, list.getEntries().map((entry) => entry.toJSON()));
    });
    try {
        observer.observe({ type: entryType, buffered: true });
    } catch (error) {
        return false;
    }
    registry[observerId] = observer;
    return true;
}
"""

_DISCONNECT_SCRIPT = """
(observerId) => {
    const registry = window.__pagewatchObservers || {};
    if (registry[observerId]) {
        registry[observerId].disconnect();
        delete registry[observerId];
    }
}
"""

_NAVIGATION_SCRIPT = """
() => {
    const [navigation] = performance.getEntriesByType('navigation');
    return navigation ? navigation.toJSON() : null;
}
"""


class _PageObservation(Observation):
    def __init__(self, instrumentation: 'PlaywrightInstrumentation', observer_id: str):
        self.instrumentation = instrumentation
        self.observer_id = observer_id

    async def disconnect(self) -> None:
        await self.instrumentation._disconnect(self.observer_id)


class PlaywrightInstrumentation(PerformanceInstrumentation):
    """Bridges in-page PerformanceObservers to Python callbacks

    Entries travel through a function exposed on the page, so callbacks run
    on the same event loop as the Playwright connection.
    """

    def __init__(self, page: Page):
        self.page = page
        self.binding_name = f"__pagewatchDeliver_{id(self):x}"
        self._binding_ready = False
        self._callbacks: Dict[str, EntryCallback] = {}
        self._ids = itertools.count(1)

    async def is_supported(self) -> bool:
        try:
            return bool(await self.page.evaluate(_SUPPORT_SCRIPT))
        except PlaywrightError as e:
            logger.warning(f"Could not check performance support: {e}")
            return False

    async def observe(self, entry_type: str, callback: EntryCallback) -> Observation:
        await self._ensure_binding()

        observer_id = f"{entry_type}-{next(self._ids)}"
        self._callbacks[observer_id] = callback

        accepted = await self.page.evaluate(
            _OBSERVE_SCRIPT, [self.binding_name, observer_id, entry_type]
        )
        if not accepted:
            logger.debug(f"Entry type not supported by page: {entry_type}")
            self._callbacks.pop(observer_id, None)

        return _PageObservation(self, observer_id)

    async def navigation_entry(self) -> Optional[PerformanceEntry]:
        try:
            return await self.page.evaluate(_NAVIGATION_SCRIPT)
        except PlaywrightError as e:
            logger.warning(f"Could not read navigation timing: {e}")
            return None

    async def _ensure_binding(self):
        if self._binding_ready:
            return
        await self.page.expose_function(self.binding_name, self._deliver)
        self._binding_ready = True

    def _deliver(self, observer_id: str, entries):
        callback = self._callbacks.get(observer_id)
        if callback is not None:
            callback(entries or [])

    async def _disconnect(self, observer_id: str):
        self._callbacks.pop(observer_id, None)
        try:
            await self.page.evaluate(_DISCONNECT_SCRIPT, observer_id)
        except PlaywrightError as e:
            # Page navigated or closed; its observers are gone with it
            logger.debug(f"Observer {observer_id} already detached: {e}")
