from dataclasses import dataclass, field, asdict
from typing import Dict, List, Any


@dataclass
class ReportSummary:
    """Windowed averages plus the current alert count"""
    total_pages: int = 0
    average_lcp: float = 0.0
    average_fid: float = 0.0
    average_cls: float = 0.0
    active_alerts: int = 0


@dataclass
class ReportTrends:
    """Per-snapshot series over the report window, oldest first"""
    lcp_trend: List[float] = field(default_factory=list)
    fid_trend: List[float] = field(default_factory=list)
    cls_trend: List[float] = field(default_factory=list)


@dataclass
class PerformanceReport:
    summary: ReportSummary = field(default_factory=ReportSummary)
    trends: ReportTrends = field(default_factory=ReportTrends)
    recommendations: List[str] = field(default_factory=list)
    ratings: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
