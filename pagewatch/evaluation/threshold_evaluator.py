"""
Threshold Evaluator - Derives alerts from a monitoring snapshot
"""

import itertools
import time
from datetime import datetime
from typing import List
from ..config import Thresholds, DEFAULT_THRESHOLDS
from ..models import Alert, AlertType, MonitoringSnapshot


class ThresholdEvaluator:
    """Checks a snapshot against thresholds

    Every rule is independent, so one snapshot can raise several alerts.
    Repeated problems raise a fresh alert on every evaluation.
    """

    def __init__(self, thresholds: Thresholds = DEFAULT_THRESHOLDS, min_alt_coverage: float = 0.9):
        self.thresholds = thresholds
        self.min_alt_coverage = min_alt_coverage
        self._sequence = itertools.count(1)

    def evaluate(self, snapshot: MonitoringSnapshot) -> List[Alert]:
        alerts: List[Alert] = []
        vitals = snapshot.core_web_vitals
        seo = snapshot.seo_metrics
        lighthouse = snapshot.lighthouse_metrics
        limits = self.thresholds

        def raise_alert(tag: str, alert_type: AlertType, message: str):
            alerts.append(self._new_alert(tag, alert_type, message, snapshot.url))

        # Core Web Vitals
        if vitals.lcp > limits.lcp:
            raise_alert('lcp', AlertType.WARNING,
                        f"LCP too high: {vitals.lcp:.0f}ms (threshold: {limits.lcp:.0f}ms)")

        if vitals.fid > limits.fid:
            raise_alert('fid', AlertType.WARNING,
                        f"FID too high: {vitals.fid:.0f}ms (threshold: {limits.fid:.0f}ms)")

        if vitals.cls > limits.cls:
            raise_alert('cls', AlertType.WARNING,
                        f"CLS too high: {vitals.cls:g} (threshold: {limits.cls:g})")

        # On-page SEO
        if not seo.page_title:
            raise_alert('title', AlertType.ERROR, "Missing page title")

        if not seo.meta_description:
            raise_alert('desc', AlertType.ERROR, "Missing meta description")

        if seo.h1_count == 0:
            raise_alert('h1', AlertType.ERROR, "No H1 heading found")

        if seo.h1_count > 1:
            raise_alert('h1-multiple', AlertType.WARNING,
                        f"Multiple H1 headings found: {seo.h1_count}")

        if seo.image_count > 0 and seo.alt_coverage < self.min_alt_coverage:
            missing = seo.image_count - seo.images_with_alt
            raise_alert('alt', AlertType.WARNING, f"{missing} images missing alt attribute")

        # Lighthouse audit scores, when supplied
        if lighthouse and lighthouse.seo_score < limits.seo_score:
            raise_alert('lighthouse-seo', AlertType.WARNING,
                        f"Low Lighthouse SEO score: {lighthouse.seo_score:g} "
                        f"(threshold: {limits.seo_score:g})")

        if lighthouse and lighthouse.performance_score < limits.performance_score:
            raise_alert('lighthouse-performance', AlertType.WARNING,
                        f"Low Lighthouse performance score: {lighthouse.performance_score:g} "
                        f"(threshold: {limits.performance_score:g})")

        return alerts

    def _new_alert(self, tag: str, alert_type: AlertType, message: str, page: str) -> Alert:
        created_ms = int(time.time() * 1000)
        return Alert(
            id=f"{tag}-{created_ms}-{next(self._sequence)}",
            type=alert_type,
            message=message,
            page=page,
            timestamp=datetime.now()
        )
