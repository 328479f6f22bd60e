"""Tests for the Core Web Vitals collector and its countdown latch.

Measurements are driven with ``asyncio.run`` against ``FakeInstrumentation``;
no browser is involved.
"""

from __future__ import annotations

import asyncio

import pytest

from pagewatch.models import CoreWebVitalsSample
from pagewatch.utils import CountdownLatch
from pagewatch.vitals import NullInstrumentation, VitalsCollector

from conftest import FakeInstrumentation, full_streams


def measure(instrumentation, timeout: float = 5.0, collector: VitalsCollector = None):
    collector = collector or VitalsCollector(instrumentation, timeout=timeout)
    return asyncio.run(collector.measure())


# ---------------------------------------------------------------------------
# CountdownLatch
# ---------------------------------------------------------------------------

class TestCountdownLatch:
    def test_zero_count_is_released_immediately(self) -> None:
        async def scenario():
            latch = CountdownLatch(0)
            return latch.released, await latch.wait(0.01)

        assert asyncio.run(scenario()) == (True, True)

    def test_releases_after_count_signals(self) -> None:
        async def scenario():
            latch = CountdownLatch(2)
            latch.count_down()
            first = latch.released
            latch.count_down()
            latch.count_down()  # extra signals are ignored
            return first, latch.released, latch.remaining

        assert asyncio.run(scenario()) == (False, True, 0)

    def test_wait_times_out(self) -> None:
        async def scenario():
            latch = CountdownLatch(1)
            return await latch.wait(0.01)

        assert asyncio.run(scenario()) is False

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            CountdownLatch(-1)


# ---------------------------------------------------------------------------
# Degraded instrumentation
# ---------------------------------------------------------------------------

class TestUnsupportedInstrumentation:
    def test_null_instrumentation_yields_zero_sample(self) -> None:
        assert measure(NullInstrumentation()) == CoreWebVitalsSample.zero()

    def test_unsupported_runtime_never_subscribes(self) -> None:
        fake = FakeInstrumentation(full_streams(), supported=False)
        sample = measure(fake)
        assert sample == CoreWebVitalsSample(0, 0, 0, 0, 0)
        assert fake.observed == []

    def test_failing_subscription_degrades_to_zero(self) -> None:
        streams = full_streams()
        fake = FakeInstrumentation(streams, failing_types=("largest-contentful-paint",))
        sample = measure(fake, timeout=0.05)
        assert sample.lcp == 0
        assert sample.fid == pytest.approx(30.0)


# ---------------------------------------------------------------------------
# Metric semantics
# ---------------------------------------------------------------------------

class TestMetricAggregation:
    def test_all_metrics_from_streams(self) -> None:
        fake = FakeInstrumentation(
            {
                "largest-contentful-paint": [
                    [{"startTime": 1000.0, "renderTime": 1200.0}],
                    [{"startTime": 2000.0, "renderTime": 0, "loadTime": 2100.0}],
                ],
                "first-input": [
                    [{"startTime": 100.0, "processingStart": 150.0}],
                    [{"startTime": 100.0, "processingStart": 500.0}],
                ],
                "layout-shift": [[
                    {"value": 0.05, "hadRecentInput": False},
                    {"value": 0.3, "hadRecentInput": True},
                    {"value": 0.02, "hadRecentInput": False},
                ]],
                "paint": [[
                    {"name": "first-paint", "startTime": 900.0},
                    {"name": "first-contentful-paint", "startTime": 1500.0},
                ]],
            },
            navigation={"requestStart": 100.0, "responseStart": 250.0},
        )

        sample = measure(fake)

        assert sample.lcp == pytest.approx(2100.0)  # last candidate wins
        assert sample.fid == pytest.approx(50.0)  # first input only
        assert sample.cls == pytest.approx(0.07)  # recent-input shifts excluded
        assert sample.fcp == pytest.approx(1500.0)
        assert sample.ttfb == pytest.approx(150.0)

    def test_unreported_streams_default_to_zero_after_bound(self) -> None:
        fake = FakeInstrumentation(
            {"largest-contentful-paint": [[{"startTime": 1800.0}]]},
            navigation={"requestStart": 10.0, "responseStart": 60.0},
        )
        sample = measure(fake, timeout=0.05)
        assert sample == CoreWebVitalsSample(lcp=1800.0, fid=0.0, cls=0.0, fcp=0.0, ttfb=50.0)

    def test_paint_without_fcp_entry_reports_zero(self) -> None:
        fake = FakeInstrumentation({"paint": [[{"name": "first-paint", "startTime": 700.0}]]})
        assert measure(fake, timeout=0.05).fcp == 0.0

    def test_negative_differences_are_clamped(self) -> None:
        fake = FakeInstrumentation(
            {"first-input": [[{"startTime": 300.0, "processingStart": 200.0}]]},
            navigation={"requestStart": 400.0, "responseStart": 100.0},
        )
        sample = measure(fake, timeout=0.05)
        assert sample.fid == 0.0
        assert sample.ttfb == 0.0

    def test_values_are_never_negative(self) -> None:
        sample = measure(FakeInstrumentation(full_streams(), navigation={}))
        for value in sample.to_dict().values():
            assert value >= 0

    def test_replayed_shift_buffer_is_counted_once(self) -> None:
        # Every new subscription receives the page's whole shift buffer again
        buffered = [{"startTime": 420.0, "value": 0.05, "hadRecentInput": False}]
        fake = FakeInstrumentation({"layout-shift": [buffered]})
        collector = VitalsCollector(fake, timeout=0.05)

        async def scenario():
            return [(await collector.measure()).cls for _ in range(3)]

        assert asyncio.run(scenario()) == pytest.approx([0.05, 0.05, 0.05])

    def test_cls_accumulates_new_shifts_across_measurements(self) -> None:
        buffer = []

        def growing_buffer():
            buffer.append({"startTime": 100.0 * (len(buffer) + 1), "value": 0.05,
                           "hadRecentInput": False})
            return [list(buffer)]

        collector = VitalsCollector(FakeInstrumentation({"layout-shift": growing_buffer}),
                                    timeout=0.05)

        async def scenario():
            first = await collector.measure()
            second = await collector.measure()
            return first, second

        first, second = asyncio.run(scenario())
        assert first.cls == pytest.approx(0.05)
        assert second.cls == pytest.approx(0.10)

    def test_shift_counting_is_per_collector(self) -> None:
        buffered = [{"startTime": 420.0, "value": 0.05, "hadRecentInput": False}]
        fake = FakeInstrumentation({"layout-shift": [buffered]})

        first = measure(fake, timeout=0.05)
        second = measure(fake, timeout=0.05)

        assert first.cls == second.cls == pytest.approx(0.05)


class TestSubscriptionLifecycle:
    def test_resolves_before_bound_when_all_streams_report(self) -> None:
        fake = FakeInstrumentation(full_streams())
        collector = VitalsCollector(fake, timeout=30.0)

        async def scenario():
            return await asyncio.wait_for(collector.measure(), timeout=5.0)

        sample = asyncio.run(scenario())
        assert sample.lcp == pytest.approx(2000.0)

    def test_observers_disconnected_after_measurement(self) -> None:
        fake = FakeInstrumentation(full_streams())
        measure(fake)
        assert sorted(fake.disconnected) == sorted(fake.observed)
        assert len(fake.observed) == 4

    def test_each_measurement_subscribes_anew(self) -> None:
        fake = FakeInstrumentation(full_streams())
        collector = VitalsCollector(fake, timeout=5.0)

        async def scenario():
            await collector.measure()
            await collector.measure()

        asyncio.run(scenario())
        assert len(fake.observed) == 8
