"""
Page Monitor - Single entry point that collects, evaluates and stores snapshots
"""

import logging
from datetime import datetime
from typing import List, Optional
from .analysis import PageSignalAnalyzer
from .config import MonitorConfig
from .evaluation import ThresholdEvaluator
from .log_manager import log_event
from .models import Alert, LighthouseMetrics, MonitoringSnapshot, PerformanceReport
from .pages import PageContext
from .reporting import ReportGenerator
from .storage import AlertRegistry, HistoryStore
from .vitals import VitalsCollector

logger = logging.getLogger(__name__)


class PageMonitor:
    """
    Performance and SEO monitor for one page context

    Sequences vitals measurement, signal analysis and threshold evaluation,
    then records the alerts and the snapshot. Every monitor owns its own
    history and alert registry.
    """

    def __init__(self, page: PageContext, config: MonitorConfig = None):
        self.page = page
        self.config = config or MonitorConfig()

        self.collector = VitalsCollector(page.instrumentation, timeout=self.config.measurement_timeout)
        self.analyzer = PageSignalAnalyzer(self.config.keywords)
        self.evaluator = ThresholdEvaluator(self.config.thresholds, self.config.min_alt_coverage)

        self.alert_registry = AlertRegistry()
        self.history = HistoryStore()
        self.report_generator = ReportGenerator(
            self.history,
            self.alert_registry,
            thresholds=self.config.thresholds,
            window=self.config.report_window,
            rating_bounds=self.config.rating_bounds
        )

    async def collect(self, url: Optional[str] = None,
                      lighthouse: Optional[LighthouseMetrics] = None) -> MonitoringSnapshot:
        """Measure, analyze and evaluate the page, recording the result"""
        vitals = await self.collector.measure()
        document = await self.page.snapshot_document()
        seo_metrics = self.analyzer.analyze(document)

        # No awaits from here on, so concurrent collects append in timestamp order
        snapshot = MonitoringSnapshot(
            url=url or self.page.url,
            timestamp=self._next_timestamp(),
            core_web_vitals=vitals,
            seo_metrics=seo_metrics,
            lighthouse_metrics=lighthouse
        )
        snapshot.alerts = self.evaluator.evaluate(snapshot)

        self.history.append(snapshot)
        self.alert_registry.append(snapshot.alerts)

        logger.info(f"Collected snapshot for {snapshot.url}: "
                    f"LCP {vitals.lcp:.0f}ms, CLS {vitals.cls:.3f}, {len(snapshot.alerts)} alerts")
        log_event('snapshot_collected', url=snapshot.url,
                  vitals=vitals.to_dict(), alerts=len(snapshot.alerts))
        for alert in snapshot.alerts:
            log_event('alert_raised', **alert.to_dict())

        return snapshot

    def get_historical_data(self, limit: Optional[int] = None) -> List[MonitoringSnapshot]:
        return self.history.recent(limit)

    def get_active_alerts(self) -> List[Alert]:
        return self.alert_registry.get_active()

    def resolve_alert(self, alert_id: str):
        """Mark an alert resolved; unknown ids are ignored"""
        if self.alert_registry.resolve(alert_id):
            log_event('alert_resolved', id=alert_id)
        else:
            logger.debug(f"No active alert to resolve for id: {alert_id}")

    def generate_performance_report(self) -> PerformanceReport:
        return self.report_generator.generate()

    def _next_timestamp(self) -> datetime:
        now = datetime.now()
        latest = self.history.latest()
        # Wall clock may step backwards; history order must not
        if latest and now < latest.timestamp:
            return latest.timestamp
        return now
