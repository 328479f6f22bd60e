from typing import Dict, List, Tuple
from ..config import Thresholds, DEFAULT_THRESHOLDS, DEFAULT_RATING_BOUNDS
from ..evaluation import rate_vital
from ..models import PerformanceReport, ReportSummary, ReportTrends
from ..storage import AlertRegistry, HistoryStore

RECOMMENDATIONS = {
    'lcp': "Optimize the loading time of the main content (LCP)",
    'fid': "Reduce the delay before the first interaction (FID)",
    'cls': "Stabilize the page layout to reduce CLS",
}


class ReportGenerator:
    """Builds trend reports over the most recent snapshots"""

    def __init__(self, history: HistoryStore, alerts: AlertRegistry,
                 thresholds: Thresholds = DEFAULT_THRESHOLDS, window: int = 10,
                 rating_bounds: Dict[str, Tuple[float, float]] = None):
        self.history = history
        self.alerts = alerts
        self.thresholds = thresholds
        self.window = window
        self.rating_bounds = rating_bounds or DEFAULT_RATING_BOUNDS

    def generate(self) -> PerformanceReport:
        recent = self.history.recent(self.window)

        trends = ReportTrends(
            lcp_trend=[s.core_web_vitals.lcp for s in recent],
            fid_trend=[s.core_web_vitals.fid for s in recent],
            cls_trend=[s.core_web_vitals.cls for s in recent]
        )

        summary = ReportSummary(
            total_pages=len(self.history),
            average_lcp=self._mean(trends.lcp_trend),
            average_fid=self._mean(trends.fid_trend),
            average_cls=self._mean(trends.cls_trend),
            active_alerts=len(self.alerts.get_active())
        )

        averages = {
            'lcp': summary.average_lcp,
            'fid': summary.average_fid,
            'cls': summary.average_cls,
        }

        recommendations: List[str] = []
        ratings: Dict[str, str] = {}
        if recent:
            for name, average in averages.items():
                if average > getattr(self.thresholds, name):
                    recommendations.append(RECOMMENDATIONS[name])
                ratings[name] = rate_vital(name, average, self.rating_bounds).value

        return PerformanceReport(
            summary=summary,
            trends=trends,
            recommendations=recommendations,
            ratings=ratings
        )

    @staticmethod
    def _mean(values: List[float]) -> float:
        return sum(values) / len(values) if values else 0.0
