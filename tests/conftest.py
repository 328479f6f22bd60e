"""Shared fakes and builders for the monitoring tests.

- ``FakeInstrumentation`` stands in for browser timing hooks: every
  ``observe`` call schedules the configured entry batches on the running
  loop, the way PerformanceObserver callbacks arrive after subscription.
- ``FakePageContext`` pairs that instrumentation with a static HTML document.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional

import pytest

from pagewatch.analysis import DocumentSnapshot, SoupDocument
from pagewatch.models import (
    CoreWebVitalsSample,
    LighthouseMetrics,
    MonitoringSnapshot,
    SEOSnapshotMetrics,
)
from pagewatch.pages import PageContext
from pagewatch.vitals import Observation, PerformanceInstrumentation


PAGE_URL = "https://kamlease.com/"

PAGE_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <title>Kamlease - Solutions mécatroniques</title>
  <meta name="description" content="Expertise en mécatronique">
  <meta name="robots" content="index, follow">
  <link rel="canonical" href="https://kamlease.com/">
  <script type="application/ld+json">{"@type": "Organization", "name": "Kamlease"}</script>
</head>
<body>
  <h1>Solutions industrielles</h1>
  <h2>Innovation</h2>
  <h2>Expertise</h2>
  <img src="a.png" alt="Logo">
  <img src="b.png" alt="">
  <img src="c.png">
  <a href="/about">About</a>
  <a href="./contact">Contact</a>
  <a href="../up">Up</a>
  <a href="https://kamlease.com/self">Self</a>
  <a href="https://example.org">Ext</a>
  <a href="http://other.net/page">Ext2</a>
  <a href="#top">Top</a>
  <a href="mailto:contact@kamlease.com">Mail</a>
  <p>Nos solutions en mécatronique et électronique.</p>
  <script>var hidden = "never counted as words";</script>
  <!-- a comment is not visible text -->
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Instrumentation fake
# ---------------------------------------------------------------------------

class FakeObservation(Observation):
    def __init__(self, instrumentation: "FakeInstrumentation", entry_type: str):
        self.instrumentation = instrumentation
        self.entry_type = entry_type
        self.connected = True

    async def disconnect(self) -> None:
        self.connected = False
        self.instrumentation.disconnected.append(self.entry_type)


class FakeInstrumentation(PerformanceInstrumentation):
    """Delivers canned entry batches.

    ``streams`` maps an entry type to a list of batches. A value may also be a
    callable returning the batches, evaluated on every ``observe`` so each
    measurement can see different entries.
    """

    def __init__(
        self,
        streams: Optional[Dict[str, Any]] = None,
        navigation: Optional[Dict[str, float]] = None,
        supported: bool = True,
        failing_types: tuple = (),
    ) -> None:
        self.streams = streams or {}
        self.navigation = navigation
        self.supported = supported
        self.failing_types = failing_types
        self.observed: List[str] = []
        self.disconnected: List[str] = []

    async def is_supported(self) -> bool:
        return self.supported

    async def observe(self, entry_type: str, callback: Callable) -> Observation:
        if entry_type in self.failing_types:
            raise RuntimeError(f"cannot observe {entry_type}")

        self.observed.append(entry_type)
        observation = FakeObservation(self, entry_type)

        batches = self.streams.get(entry_type, [])
        if callable(batches):
            batches = batches()

        loop = asyncio.get_running_loop()
        for batch in batches:
            loop.call_soon(self._deliver, observation, callback, batch)
        return observation

    async def navigation_entry(self) -> Optional[Dict[str, float]]:
        return self.navigation

    @staticmethod
    def _deliver(observation: FakeObservation, callback: Callable, batch) -> None:
        if observation.connected:
            callback(batch)


def full_streams(lcp: float = 2000.0) -> Dict[str, Any]:
    """One batch on every stream, enough to release a measurement early."""
    return {
        "largest-contentful-paint": [[{"startTime": lcp}]],
        "first-input": [[{"startTime": 100.0, "processingStart": 130.0}]],
        "layout-shift": [[{"value": 0.01, "hadRecentInput": False}]],
        "paint": [[{"name": "first-contentful-paint", "startTime": 900.0}]],
    }


# ---------------------------------------------------------------------------
# Page context fake
# ---------------------------------------------------------------------------

class FakePageContext(PageContext):
    def __init__(self, instrumentation: PerformanceInstrumentation,
                 html: str = PAGE_HTML, url: str = PAGE_URL) -> None:
        self._instrumentation = instrumentation
        self.html = html
        self._url = url
        self.documents_read = 0

    @property
    def url(self) -> str:
        return self._url

    @property
    def instrumentation(self) -> PerformanceInstrumentation:
        return self._instrumentation

    async def snapshot_document(self) -> DocumentSnapshot:
        self.documents_read += 1
        return SoupDocument(self.html, self._url)


# ---------------------------------------------------------------------------
# Snapshot builders
# ---------------------------------------------------------------------------

def clean_seo(**overrides: Any) -> SEOSnapshotMetrics:
    """SEO metrics that violate no rule, with optional overrides."""
    fields = dict(
        page_title="Kamlease",
        meta_description="Mechatronics solutions",
        h1_count=1,
        h2_count=2,
        image_count=0,
        images_with_alt=0,
        word_count=120,
    )
    fields.update(overrides)
    return SEOSnapshotMetrics(**fields)


def make_snapshot(
    vitals: Optional[CoreWebVitalsSample] = None,
    seo: Optional[SEOSnapshotMetrics] = None,
    lighthouse: Optional[LighthouseMetrics] = None,
    timestamp: Optional[datetime] = None,
    url: str = PAGE_URL,
) -> MonitoringSnapshot:
    return MonitoringSnapshot(
        url=url,
        timestamp=timestamp or datetime.now(),
        core_web_vitals=vitals or CoreWebVitalsSample(lcp=1200, fid=40, cls=0.02, fcp=800, ttfb=200),
        seo_metrics=seo or clean_seo(),
        lighthouse_metrics=lighthouse,
    )


def snapshot_series(lcps: List[float], start: Optional[datetime] = None) -> List[MonitoringSnapshot]:
    start = start or datetime(2026, 1, 1, 12, 0, 0)
    return [
        make_snapshot(
            vitals=CoreWebVitalsSample(lcp=lcp, fid=50.0, cls=0.05),
            timestamp=start + timedelta(seconds=i),
        )
        for i, lcp in enumerate(lcps)
    ]


@pytest.fixture()
def page_document() -> SoupDocument:
    return SoupDocument(PAGE_HTML, PAGE_URL)
