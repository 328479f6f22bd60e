from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Thresholds:
    """Bounds beyond which a metric is considered problematic"""
    lcp: float = 2500.0  # ms
    fid: float = 100.0  # ms
    cls: float = 0.1
    fcp: float = 1800.0  # ms
    ttfb: float = 600.0  # ms
    seo_score: float = 90.0
    performance_score: float = 90.0


DEFAULT_THRESHOLDS = Thresholds()

DEFAULT_KEYWORDS = [
    'mécatronique', 'électronique', 'auto-staging', 'industrielle',
    'solutions', 'innovation', 'développement', 'expertise'
]

# (good, poor) upper bounds per vital
DEFAULT_RATING_BOUNDS = {
    'lcp': (2500.0, 4000.0),
    'fid': (100.0, 300.0),
    'cls': (0.1, 0.25),
    'fcp': (1800.0, 3000.0),
    'ttfb': (800.0, 1800.0),
}


@dataclass
class MonitorConfig:
    """Configuration for a page monitor"""
    thresholds: Thresholds = DEFAULT_THRESHOLDS
    keywords: List[str] = None
    measurement_timeout: float = 1.0  # seconds
    report_window: int = 10
    min_alt_coverage: float = 0.9
    rating_bounds: Dict[str, Tuple[float, float]] = None

    def __post_init__(self):
        if self.keywords is None:
            self.keywords = list(DEFAULT_KEYWORDS)
        if self.rating_bounds is None:
            self.rating_bounds = dict(DEFAULT_RATING_BOUNDS)
        if self.measurement_timeout < 0:
            raise ValueError("measurement_timeout must be non-negative")
        if self.report_window < 1:
            raise ValueError("report_window must be at least 1")
