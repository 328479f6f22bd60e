from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class LighthouseMetrics:
    """Audit scores (0-100) supplied by an external Lighthouse run"""
    seo_score: float = 0.0
    performance_score: float = 0.0
    accessibility_score: float = 0.0
    best_practices_score: float = 0.0
    pwa_score: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
